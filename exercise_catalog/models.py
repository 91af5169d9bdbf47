"""
Catalog Models - Value types for the ExerciseDB integration layer.

- CanonicalExercise: provider-agnostic record produced by the normalizer
- ExerciseMedia: resolved image / animation / video URLs
- CatalogRecord: projection inserted into exercise_definitions
- FailoverResult: raw provider JSON plus the provider that served it
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class ExerciseMedia:
    """Resolved media URLs. Each is independently optional."""
    image_url: Optional[str] = None
    animated_url: Optional[str] = None
    video_url: Optional[str] = None

    @property
    def display_url(self) -> Optional[str]:
        """Animated loop preferred, then still image."""
        return self.animated_url or self.image_url

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "imageUrl": self.image_url,
            "animatedUrl": self.animated_url,
            "videoUrl": self.video_url,
        }


@dataclass(frozen=True)
class CanonicalExercise:
    """Normalized exercise record. No identity beyond `id`."""
    name: str = UNKNOWN_NAME
    id: Optional[str] = None
    body_parts: Tuple[str, ...] = ()
    equipments: Tuple[str, ...] = ()
    target_muscles: Tuple[str, ...] = ()
    secondary_muscles: Tuple[str, ...] = ()
    instructions: Tuple[str, ...] = ()
    tips: Tuple[str, ...] = ()
    variations: Tuple[str, ...] = ()
    related_ids: Tuple[str, ...] = ()

    # Raw media values as returned by the provider (unresolved)
    gif_url: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None

    # Free text
    overview: Optional[str] = None
    description: Optional[str] = None
    exercise_type: Optional[str] = None

    # Set by the media resolver only
    media: Optional[ExerciseMedia] = None

    @property
    def primary_body_part(self) -> Optional[str]:
        return self.body_parts[0] if self.body_parts else None

    @property
    def primary_equipment(self) -> Optional[str]:
        return self.equipments[0] if self.equipments else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dict for JSON output."""
        return {
            "id": self.id,
            "name": self.name,
            "bodyParts": list(self.body_parts),
            "equipments": list(self.equipments),
            "targetMuscles": list(self.target_muscles),
            "secondaryMuscles": list(self.secondary_muscles),
            "instructions": list(self.instructions),
            "tips": list(self.tips),
            "variations": list(self.variations),
            "relatedIds": list(self.related_ids),
            "gifUrl": self.gif_url,
            "imageUrl": self.image_url,
            "videoUrl": self.video_url,
            "overview": self.overview,
            "description": self.description,
            "exerciseType": self.exercise_type,
            "media": self.media.to_dict() if self.media else None,
        }


@dataclass(frozen=True)
class CatalogRecord:
    """Persistence-bound projection of a CanonicalExercise."""
    name: str
    muscle_group: str
    category: str
    equipment: str
    description: str
    video_url: str = ""
    source_id: str = ""
    image_url: str = ""
    animated_url: str = ""
    target_muscles: List[str] = field(default_factory=list)
    secondary_muscles: List[str] = field(default_factory=list)
    variations: List[str] = field(default_factory=list)
    related_ids: List[str] = field(default_factory=list)

    def to_row(self) -> Dict[str, Any]:
        """Convert to exercise_definitions column names."""
        return {
            "name": self.name,
            "muscle_group": self.muscle_group,
            "category": self.category,
            "equipment": self.equipment,
            "description": self.description,
            "video_url": self.video_url,
            "exercisedb_id": self.source_id,
            "exercisedb_image_url": self.image_url,
            "exercisedb_gif_url": self.animated_url,
            "exercisedb_target_muscles": list(self.target_muscles),
            "exercisedb_secondary_muscles": list(self.secondary_muscles),
            "exercisedb_variations": list(self.variations),
            "exercisedb_related_exercises": list(self.related_ids),
        }


@dataclass(frozen=True)
class FailoverResult:
    """Successful orchestrator outcome."""
    data: Any
    provider: str
    primary_error: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.primary_error is not None
