"""
Response Normalizer - Raw provider JSON -> CanonicalExercise.

Providers disagree on casing (camelCase vs snake_case), nesting and whether
body part / equipment are scalars or arrays. Each logical field resolves
through a closed priority list of keys; the first present-and-non-null value
wins. Unrecognized keys are ignored.

Only raw values are captured here. Media URL resolution is a separate step
(see media.py).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from exercise_catalog.errors import MalformedResponse
from exercise_catalog.models import UNKNOWN_NAME, CanonicalExercise

logger = logging.getLogger(__name__)

# Field -> keys in priority order
FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
    "id": ("id", "exerciseId", "exercise_id"),
    "name": ("name", "exerciseName"),
    "gif_url": ("gifUrl", "gif_url", "gif"),
    "image_url": ("imageUrl", "image_url", "image"),
    "video_url": ("videoUrl", "video_url", "video"),
    "body_parts": ("bodyPart", "body_part", "bodyParts", "body_parts"),
    "equipments": ("equipment", "equipments", "equipment_list"),
    "target_muscles": ("targetMuscles", "target_muscles", "target"),
    "secondary_muscles": ("secondaryMuscles", "secondary_muscles", "secondary"),
    "instructions": ("instructions",),
    "tips": ("exerciseTips", "exercise_tips", "tips"),
    "variations": ("variations",),
    "related_ids": ("relatedExerciseIds", "related_exercise_ids", "related"),
    "overview": ("overview",),
    "description": ("description",),
    "exercise_type": ("exerciseType", "exercise_type", "type"),
}

TEXT_FIELDS = (
    "id", "gif_url", "image_url", "video_url",
    "overview", "description", "exercise_type",
)
LIST_FIELDS = (
    "body_parts", "equipments", "target_muscles", "secondary_muscles",
    "instructions", "tips", "variations", "related_ids",
)


def _first(raw: Dict[str, Any], keys: Sequence[str]) -> Any:
    """First present-and-non-null value among keys, else None."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def _as_list(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    items: Iterable[Any] = value if isinstance(value, (list, tuple)) else [value]
    result = []
    for item in items:
        text = _as_text(item)
        if text is not None:
            result.append(text)
    return tuple(result)


def normalize(raw: Any) -> CanonicalExercise:
    """
    Normalize one provider item. Never raises.

    Non-object input yields a record named "Unknown" with everything else
    absent.
    """
    if not isinstance(raw, dict):
        return CanonicalExercise(name=UNKNOWN_NAME)

    values: Dict[str, Any] = {}
    for field_name in TEXT_FIELDS:
        values[field_name] = _as_text(_first(raw, FIELD_KEYS[field_name]))
    for field_name in LIST_FIELDS:
        values[field_name] = _as_list(_first(raw, FIELD_KEYS[field_name]))

    name = _as_text(_first(raw, FIELD_KEYS["name"])) or UNKNOWN_NAME
    return CanonicalExercise(name=name, **values)


def _extract_items(raw: Any) -> List[Any]:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict) and "success" in raw and "data" in raw:
        data = raw["data"]
        return data if isinstance(data, list) else []
    if isinstance(raw, dict):
        raise MalformedResponse("object with keys " + ", ".join(sorted(map(str, raw))[:10]))
    raise MalformedResponse(type(raw).__name__)


def normalize_many(raw: Any) -> List[CanonicalExercise]:
    """
    Normalize a list response.

    Accepts a {success, data: [...]} envelope or a bare array. Anything else
    degrades to an empty list.
    """
    try:
        items = _extract_items(raw)
    except MalformedResponse as e:
        logger.warning("Treating provider response as empty: %s", e)
        return []
    return [normalize(item) for item in items]


def normalize_single(raw: Any) -> Optional[CanonicalExercise]:
    """
    Normalize a by-id response.

    Accepts a bare object, a {success, data: {...}} envelope, or a list
    (first item wins). Returns None when no exercise is present.
    """
    if isinstance(raw, dict) and "success" in raw and "data" in raw:
        raw = raw["data"]
    if isinstance(raw, list):
        raw = raw[0] if raw else None
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Treating by-id response as empty: %s", type(raw).__name__)
        return None
    return normalize(raw)
