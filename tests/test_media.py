"""Tests for media URL resolution."""

from exercise_catalog.media import (
    GIF_CDN_BASE,
    IMAGE_CDN_BASE,
    VIDEO_CDN_BASE,
    MediaCdn,
    absolutize,
    resolve_media,
    with_media,
)
from exercise_catalog.models import CanonicalExercise, ExerciseMedia


class TestAbsolutize:

    def test_absolute_passthrough(self):
        assert absolutize("https://example.com/a.gif", GIF_CDN_BASE) == "https://example.com/a.gif"

    def test_relative_is_prefixed(self):
        assert absolutize("a.gif", GIF_CDN_BASE) == f"{GIF_CDN_BASE}/a.gif"

    def test_leading_slash_not_doubled(self):
        assert absolutize("/a.gif", "https://cdn.test/gifs/") == "https://cdn.test/gifs/a.gif"

    def test_empty_is_absent(self):
        assert absolutize(None, GIF_CDN_BASE) is None
        assert absolutize("", GIF_CDN_BASE) is None


class TestResolveMedia:

    def test_animated_from_gif_field(self):
        media = resolve_media(CanonicalExercise(name="Squat", gif_url="squat.gif"))
        assert media.animated_url == f"{GIF_CDN_BASE}/squat.gif"
        assert media.image_url is None

    def test_image_from_image_field(self):
        media = resolve_media(CanonicalExercise(name="Squat", image_url="squat.png"))
        assert media.image_url == f"{IMAGE_CDN_BASE}/squat.png"
        assert media.animated_url is None

    def test_explicit_fields_beat_synthesis(self):
        record = CanonicalExercise(name="Squat", id="ex_1", image_url="http://img/squat.png")
        media = resolve_media(record)
        assert media.image_url == "http://img/squat.png"
        assert media.animated_url is None

    def test_synthesized_from_id(self):
        media = resolve_media(CanonicalExercise(name="Squat", id="ex_123"))
        assert media.animated_url == f"{GIF_CDN_BASE}/ex_123"
        assert media.image_url is None

    def test_nothing_to_resolve(self):
        media = resolve_media(CanonicalExercise(name="Squat"))
        assert media.animated_url is None
        assert media.image_url is None
        assert media.display_url is None

    def test_video_relative_and_absolute(self):
        assert resolve_media(CanonicalExercise(video_url="squat.mp4")).video_url == f"{VIDEO_CDN_BASE}/squat.mp4"
        assert resolve_media(CanonicalExercise(video_url="https://v/x.mp4")).video_url == "https://v/x.mp4"

    def test_video_never_synthesized(self):
        assert resolve_media(CanonicalExercise(id="ex_123")).video_url is None

    def test_custom_cdn(self):
        cdn = MediaCdn(gif_base="https://gifs.test", image_base="https://img.test", video_base="https://vid.test")
        media = resolve_media(CanonicalExercise(id="ex_5", video_url="v.mp4"), cdn)
        assert media.animated_url == "https://gifs.test/ex_5"
        assert media.video_url == "https://vid.test/v.mp4"


class TestDisplayUrl:

    def test_prefers_animation(self):
        assert ExerciseMedia(image_url="i", animated_url="a").display_url == "a"

    def test_falls_back_to_image(self):
        assert ExerciseMedia(image_url="i").display_url == "i"


class TestWithMedia:

    def test_returns_new_record(self):
        record = CanonicalExercise(name="Squat", gif_url="squat.gif")
        resolved = with_media(record)
        assert record.media is None
        assert resolved.media.animated_url == f"{GIF_CDN_BASE}/squat.gif"
        assert resolved.name == record.name
