"""
Media Resolver - Derive display URLs for a CanonicalExercise.

Precedence:
1. Animated: explicit gif field (absolute passthrough, relative -> gif CDN)
2. Image: explicit image field (absolute passthrough, relative -> image CDN)
3. Neither present but id known: synthesized <gif CDN>/<id>
4. Otherwise no image and no animation (callers render a placeholder)

Video uses the same absolute/relative rule against the video CDN and is
never synthesized.

The synthesized URL is a best-effort guess for list endpoints that omit
media the by-id endpoint includes. It is not validated; consumers must
handle a broken image.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from exercise_catalog.models import CanonicalExercise, ExerciseMedia

GIF_CDN_BASE = "https://v2.exercisedb.dev/gifs"
IMAGE_CDN_BASE = "https://cdn.exercisedb.dev/images"
VIDEO_CDN_BASE = "https://cdn.exercisedb.dev/videos"


@dataclass(frozen=True)
class MediaCdn:
    """CDN path prefixes for relative media values."""
    gif_base: str = GIF_CDN_BASE
    image_base: str = IMAGE_CDN_BASE
    video_base: str = VIDEO_CDN_BASE


DEFAULT_CDN = MediaCdn()


def absolutize(value: Optional[str], base: str) -> Optional[str]:
    """Pass absolute URLs through; prefix relative values with base."""
    if not value:
        return None
    if value.startswith("http"):
        return value
    return f"{base.rstrip('/')}/{value.lstrip('/')}"


def synthesize_animation_url(exercise_id: str, cdn: MediaCdn = DEFAULT_CDN) -> str:
    return f"{cdn.gif_base.rstrip('/')}/{exercise_id}"


def resolve_media(record: CanonicalExercise, cdn: Optional[MediaCdn] = None) -> ExerciseMedia:
    """Resolve image, animation and video URLs for a record."""
    cdn = cdn or DEFAULT_CDN
    animated_url = absolutize(record.gif_url, cdn.gif_base)
    image_url = absolutize(record.image_url, cdn.image_base)

    if animated_url is None and image_url is None and record.id:
        animated_url = synthesize_animation_url(record.id, cdn)

    return ExerciseMedia(
        image_url=image_url,
        animated_url=animated_url,
        video_url=absolutize(record.video_url, cdn.video_base),
    )


def with_media(record: CanonicalExercise, cdn: Optional[MediaCdn] = None) -> CanonicalExercise:
    """Return a copy of record carrying its resolved media."""
    return replace(record, media=resolve_media(record, cdn))
