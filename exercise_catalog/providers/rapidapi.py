"""
RapidAPI Provider - Primary ExerciseDB provider.

Authenticates with two headers (x-rapidapi-host, x-rapidapi-key). A
provider without a key raises NotConfigured instead of making a call that
would be rejected anyway; the orchestrator treats that as a fallback trigger.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from exercise_catalog.config import API_KEY_VAR, RAPIDAPI_BASE_URL, RAPIDAPI_HOST
from exercise_catalog.errors import NotConfigured
from exercise_catalog.libs.http import HttpClient, encode_segment
from exercise_catalog.providers.base import ExerciseProvider, require_text

logger = logging.getLogger(__name__)

IMAGE_RESOLUTIONS = ("180", "360", "720", "1080")
DEFAULT_IMAGE_RESOLUTION = "360"


def coerce_resolution(resolution: Optional[str]) -> str:
    """Clamp an image resolution to the supported set."""
    value = str(resolution).strip() if resolution is not None else ""
    return value if value in IMAGE_RESOLUTIONS else DEFAULT_IMAGE_RESOLUTION


class RapidApiProvider(ExerciseProvider):
    """ExerciseDB on RapidAPI."""

    name = "RapidAPI"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = RAPIDAPI_BASE_URL,
        host: str = RAPIDAPI_HOST,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Args:
            api_key: RapidAPI key (None leaves the provider unconfigured)
            base_url: API base URL
            host: Value for the x-rapidapi-host header
            timeout_seconds: Request timeout (None = library default)
        """
        self.api_key = api_key
        self.host = host
        self._http = HttpClient(
            base_url=base_url,
            provider=self.name,
            timeout_seconds=timeout_seconds,
        )

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _auth_headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise NotConfigured(self.name, API_KEY_VAR)
        return {
            "x-rapidapi-host": self.host,
            "x-rapidapi-key": self.api_key,
        }

    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        headers = self._auth_headers()
        return self._http.get(path, params=params, headers=headers)

    def _search_request(self, query: str, limit: int) -> Tuple[str, Dict[str, Any]]:
        return f"/exercises/name/{encode_segment(query)}", {"limit": limit}

    def fetch_image(self, exercise_id: str, resolution: Optional[str] = None) -> Tuple[bytes, str]:
        """
        Fetch the animated demonstration image for an exercise.

        Args:
            exercise_id: Provider exercise id
            resolution: One of 180/360/720/1080 (anything else -> 360)

        Returns:
            (image bytes, content type)
        """
        exercise_id = require_text(exercise_id, "id")
        headers = self._auth_headers()
        params = {"exerciseId": exercise_id, "resolution": coerce_resolution(resolution)}
        body, content_type = self._http.get_bytes("/image", params=params, headers=headers)
        logger.debug("Fetched image: id=%s bytes=%d", exercise_id, len(body))
        return body, content_type or "image/gif"
