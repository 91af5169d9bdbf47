"""
Providers - HTTP clients for upstream exercise-data providers.
"""

from exercise_catalog.providers.base import (
    DEFAULT_LIMIT,
    ExerciseProvider,
    require_limit,
    require_text,
)
from exercise_catalog.providers.rapidapi import RapidApiProvider, coerce_resolution
from exercise_catalog.providers.exercisedb_v2 import ExerciseDbV2Provider

__all__ = [
    "DEFAULT_LIMIT",
    "ExerciseProvider",
    "RapidApiProvider",
    "ExerciseDbV2Provider",
    "coerce_resolution",
    "require_limit",
    "require_text",
]
