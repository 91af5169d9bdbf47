"""
Provider Interface - Narrow contract shared by every ExerciseDB provider.

Every provider exposes the same query shapes so the failover orchestrator
stays provider-agnostic:
- search_by_name(query, limit)
- by_body_part(part, limit)
- by_equipment(equipment, limit)
- by_target(target, limit)
- by_id(exercise_id)

Arguments are validated before any network I/O.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from exercise_catalog.errors import InvalidArgument
from exercise_catalog.libs.http import encode_segment

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


def require_text(value: Any, parameter: str) -> str:
    """Return the stripped value, or raise InvalidArgument if empty."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(parameter)
    return value.strip()


def require_limit(limit: Any) -> int:
    """
    Validate a result-set bound.

    Only ints are accepted. Floats (5.9), numeric strings ("5") and bools are
    rejected rather than coerced.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidArgument("limit", "must be a positive integer")
    return limit


class ExerciseProvider(ABC):
    """
    Abstract exercise-data provider.

    Implementations:
    - RapidApiProvider: Primary, API-key authenticated
    - ExerciseDbV2Provider: Secondary, open access

    All query methods return the provider's decoded JSON unchanged (a bare
    array, a {success, data} envelope, or a single object for by_id).
    """

    name: str = "provider"

    def is_configured(self) -> bool:
        """Whether the provider has the credentials it needs."""
        return True

    @abstractmethod
    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Issue one GET against the provider and return decoded JSON."""
        pass

    @abstractmethod
    def _search_request(self, query: str, limit: int) -> Tuple[str, Dict[str, Any]]:
        """Path and params for a by-name search."""
        pass

    def search_by_name(self, query: str, limit: int = DEFAULT_LIMIT) -> Any:
        query = require_text(query, "query")
        path, params = self._search_request(query, require_limit(limit))
        logger.debug("%s search_by_name: query=%s", self.name, query)
        return self._request(path, params)

    def by_body_part(self, part: str, limit: int = DEFAULT_LIMIT) -> Any:
        part = require_text(part, "bodyPart")
        params = {"limit": require_limit(limit)}
        logger.debug("%s by_body_part: part=%s", self.name, part)
        return self._request(f"/exercises/bodyPart/{encode_segment(part.upper())}", params)

    def by_equipment(self, equipment: str, limit: int = DEFAULT_LIMIT) -> Any:
        equipment = require_text(equipment, "equipment")
        params = {"limit": require_limit(limit)}
        logger.debug("%s by_equipment: equipment=%s", self.name, equipment)
        return self._request(f"/exercises/equipment/{encode_segment(equipment.upper())}", params)

    def by_target(self, target: str, limit: int = DEFAULT_LIMIT) -> Any:
        target = require_text(target, "target")
        params = {"limit": require_limit(limit)}
        logger.debug("%s by_target: target=%s", self.name, target)
        return self._request(f"/exercises/target/{encode_segment(target)}", params)

    def by_id(self, exercise_id: str) -> Any:
        exercise_id = require_text(exercise_id, "id")
        logger.debug("%s by_id: id=%s", self.name, exercise_id)
        return self._request(f"/exercises/{encode_segment(exercise_id)}")
