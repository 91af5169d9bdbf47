"""
ExerciseDB v2 Provider - Open-access secondary provider.

No authentication. Name search uses query parameters; the other shapes share
the primary's path layout. Responses usually arrive as {success, data}
envelopes with snake_case or array-valued fields.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from exercise_catalog.config import FALLBACK_BASE_URL
from exercise_catalog.libs.http import HttpClient
from exercise_catalog.providers.base import ExerciseProvider


class ExerciseDbV2Provider(ExerciseProvider):
    """ExerciseDB v2 public API."""

    name = "ExerciseDB v2"

    def __init__(self, base_url: str = FALLBACK_BASE_URL, timeout_seconds: Optional[float] = None):
        self._http = HttpClient(
            base_url=base_url,
            provider=self.name,
            timeout_seconds=timeout_seconds,
        )

    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._http.get(path, params=params)

    def _search_request(self, query: str, limit: int) -> Tuple[str, Dict[str, Any]]:
        return "/exercises", {"name": query, "limit": limit}
