"""
Exercise Catalog - ExerciseDB integration layer for the admin dashboard.

This package provides:
- providers: HTTP clients for the RapidAPI and v2 ExerciseDB providers
- failover: Primary -> fallback orchestration across providers
- normalizer: Raw provider JSON -> CanonicalExercise
- media: Image / animation / video URL resolution
- mapper: CanonicalExercise -> CatalogRecord (persistence shape)
- catalog: Direct (server) and remote (browser proxy) catalog facades
- server: Flask proxy exposing the query boundary to browser code
- libs: HTTP transport shared by the clients

Entry points:
- cli.py: Command-line queries and local proxy server
- exercise_catalog.server:create_app: WSGI application factory
"""

from exercise_catalog.errors import (
    CatalogError,
    InvalidArgument,
    NotConfigured,
    UpstreamError,
    BothProvidersFailed,
    MalformedResponse,
    InvalidSetting,
)
from exercise_catalog.models import CanonicalExercise, ExerciseMedia, CatalogRecord
from exercise_catalog.normalizer import normalize, normalize_many, normalize_single
from exercise_catalog.media import resolve_media, with_media
from exercise_catalog.mapper import to_catalog_record

__all__ = [
    # Errors
    "CatalogError",
    "InvalidArgument",
    "NotConfigured",
    "UpstreamError",
    "BothProvidersFailed",
    "MalformedResponse",
    "InvalidSetting",
    # Models
    "CanonicalExercise",
    "ExerciseMedia",
    "CatalogRecord",
    # Pipeline
    "normalize",
    "normalize_many",
    "normalize_single",
    "resolve_media",
    "with_media",
    "to_catalog_record",
]
