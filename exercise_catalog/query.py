"""
Catalog Query - The query shapes shared by the orchestrator and the proxy.

Actions (proxy body key in parentheses):
- search (query)
- bodyPart (bodyPart)
- equipment (equipment)
- target (target)
- byId (id)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from exercise_catalog.errors import InvalidArgument
from exercise_catalog.providers.base import (
    DEFAULT_LIMIT,
    ExerciseProvider,
    require_limit,
    require_text,
)

ACTION_SEARCH = "search"
ACTION_BODY_PART = "bodyPart"
ACTION_EQUIPMENT = "equipment"
ACTION_TARGET = "target"
ACTION_BY_ID = "byId"

# action -> payload key holding the query value
ACTION_PARAMETERS: Dict[str, str] = {
    ACTION_SEARCH: "query",
    ACTION_BODY_PART: "bodyPart",
    ACTION_EQUIPMENT: "equipment",
    ACTION_TARGET: "target",
    ACTION_BY_ID: "id",
}

INVALID_ACTION_MESSAGE = "Invalid action"


def require_action(action: Any) -> str:
    """Return action if it is a known action name, else raise InvalidArgument."""
    if not isinstance(action, str) or action not in ACTION_PARAMETERS:
        raise InvalidArgument("action", "is invalid", message=INVALID_ACTION_MESSAGE)
    return action


@dataclass(frozen=True)
class CatalogQuery:
    """A validated query. Construction fails fast with InvalidArgument."""
    action: str
    value: str
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        require_action(self.action)
        object.__setattr__(self, "value", require_text(self.value, self.parameter))
        object.__setattr__(self, "limit", require_limit(self.limit))

    @property
    def parameter(self) -> str:
        return ACTION_PARAMETERS[self.action]

    @property
    def returns_list(self) -> bool:
        return self.action != ACTION_BY_ID

    @classmethod
    def from_payload(cls, payload: Any) -> "CatalogQuery":
        """
        Parse a proxy request body.

        Raises:
            InvalidArgument: Not an object, unknown action, or missing value
        """
        if not isinstance(payload, dict):
            raise InvalidArgument("body", "must be a JSON object")
        action = require_action(payload.get("action"))
        limit = payload.get("limit")
        return cls(
            action=action,
            value=payload.get(ACTION_PARAMETERS[action]),
            limit=DEFAULT_LIMIT if limit is None else limit,
        )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"action": self.action, self.parameter: self.value}
        if self.returns_list:
            payload["limit"] = self.limit
        return payload

    def dispatch(self, provider: ExerciseProvider) -> Any:
        """Run this query against one provider."""
        if self.action == ACTION_SEARCH:
            return provider.search_by_name(self.value, self.limit)
        if self.action == ACTION_BODY_PART:
            return provider.by_body_part(self.value, self.limit)
        if self.action == ACTION_EQUIPMENT:
            return provider.by_equipment(self.value, self.limit)
        if self.action == ACTION_TARGET:
            return provider.by_target(self.value, self.limit)
        return provider.by_id(self.value)
