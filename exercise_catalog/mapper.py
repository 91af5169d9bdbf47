"""
Catalog Mapper - CanonicalExercise -> CatalogRecord.

Total and deterministic: every record, however sparse, maps to a row that
satisfies the store's non-null constraints on name, muscle_group, equipment
and category.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from exercise_catalog.media import MediaCdn, resolve_media
from exercise_catalog.models import UNKNOWN_NAME, CanonicalExercise, CatalogRecord

DEFAULT_MUSCLE_GROUP = "FULL BODY"
DEFAULT_EQUIPMENT = "BODYWEIGHT"
DEFAULT_CATEGORY = "Strength"

CATEGORY_MAP: Dict[str, str] = {
    "STRENGTH": "Strength",
    "CARDIO": "Cardio",
    "STRETCHING": "Mobility",
    "POWERLIFTING": "Strength",
    "OLYMPIC_WEIGHTLIFTING": "Olympic Weightlifting",
    "STRONGMAN": "Strength",
    "PLYOMETRICS": "Functional",
}

TIP_BULLET = "•"


def map_category(exercise_type: Optional[str]) -> str:
    """Map a provider exercise type onto the fixed category vocabulary."""
    if not exercise_type:
        return DEFAULT_CATEGORY
    key = exercise_type.strip().upper().replace(" ", "_").replace("-", "_")
    return CATEGORY_MAP.get(key, DEFAULT_CATEGORY)


def build_description(record: CanonicalExercise) -> str:
    """
    Overview, description, numbered instructions, bulleted tips - in that
    order, skipping empty sections. Falls back to the exercise name.
    """
    parts: List[str] = []
    if record.overview:
        parts.append(record.overview)
    if record.description:
        parts.append(record.description)
    if record.instructions:
        steps = "\n".join(f"{i}. {step}" for i, step in enumerate(record.instructions, start=1))
        parts.append("\n\nInstructions:\n" + steps)
    if record.tips:
        bullets = "\n".join(f"{TIP_BULLET} {tip}" for tip in record.tips)
        parts.append("\n\nTips:\n" + bullets)
    return "".join(parts) or record.name or ""


def _upper_or(value: Optional[str], default: str) -> str:
    value = (value or "").strip()
    return value.upper() if value else default


def _as_list(values: Sequence[str]) -> List[str]:
    return list(values) if values else []


def to_catalog_record(record: CanonicalExercise, cdn: Optional[MediaCdn] = None) -> CatalogRecord:
    """Project a canonical record into the persistence shape."""
    media = record.media if record.media is not None else resolve_media(record, cdn)

    return CatalogRecord(
        name=record.name or UNKNOWN_NAME,
        muscle_group=_upper_or(record.primary_body_part, DEFAULT_MUSCLE_GROUP),
        category=map_category(record.exercise_type),
        equipment=_upper_or(record.primary_equipment, DEFAULT_EQUIPMENT),
        description=build_description(record),
        video_url=media.video_url or "",
        source_id=record.id or "",
        image_url=media.image_url or "",
        animated_url=media.display_url or "",
        target_muscles=_as_list(record.target_muscles),
        secondary_muscles=_as_list(record.secondary_muscles),
        variations=_as_list(record.variations),
        related_ids=_as_list(record.related_ids),
    )
