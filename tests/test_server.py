"""Tests for the Flask catalog proxy."""

from unittest.mock import MagicMock

import pytest

from conftest import FakeProvider, http_error
from exercise_catalog.config import CatalogSettings
from exercise_catalog.errors import NotConfigured, UpstreamError
from exercise_catalog.failover import FailoverOrchestrator
from exercise_catalog.providers import RapidApiProvider
from exercise_catalog.server import create_app

QUERY_PATH = "/exercise-catalog/query"


@pytest.fixture
def providers():
    return FakeProvider("primary", response=[{"id": "0001", "name": "Push Up"}]), FakeProvider("fallback", response=[])


@pytest.fixture
def image_provider():
    return MagicMock()


@pytest.fixture
def client(providers, image_provider):
    primary, fallback = providers
    app = create_app(
        settings=CatalogSettings(),
        orchestrator=FailoverOrchestrator(primary, fallback),
        image_provider=image_provider,
    )
    app.config["TESTING"] = True
    return app.test_client()


# =============================================================================
# QUERY RELAY
# =============================================================================


class TestQueryRoute:

    def test_success_returns_raw_json(self, client):
        resp = client.post(QUERY_PATH, json={"action": "search", "query": "push", "limit": 5})

        assert resp.status_code == 200
        assert resp.get_json() == [{"id": "0001", "name": "Push Up"}]
        assert resp.headers["X-Catalog-Provider"] == "primary"

    def test_bogus_action_makes_no_upstream_call(self, client, providers):
        resp = client.post(QUERY_PATH, json={"action": "bogus"})

        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Invalid action"}
        assert all(p.calls == [] for p in providers)

    @pytest.mark.parametrize("action", [["search"], {}, {"x": 1}, 7, None])
    def test_non_string_action_is_client_error(self, client, providers, action):
        resp = client.post(QUERY_PATH, json={"action": action, "query": "squat"})

        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Invalid action"}
        assert all(p.calls == [] for p in providers)

    def test_float_limit_is_client_error(self, client, providers):
        resp = client.post(QUERY_PATH, json={"action": "search", "query": "squat", "limit": 5.9})
        assert resp.status_code == 400
        assert providers[0].calls == []

    def test_missing_parameter(self, client):
        resp = client.post(QUERY_PATH, json={"action": "search"})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "query required"}

    def test_invalid_json(self, client):
        resp = client.post(QUERY_PATH, data="{not json", content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Invalid JSON body"}

    def test_non_object_body(self, client):
        resp = client.post(QUERY_PATH, json=["search"])
        assert resp.status_code == 400

    def test_fallback_provider_is_reported(self, client, providers):
        primary, fallback = providers
        primary.error = http_error("primary", 500)
        fallback.response = {"success": True, "data": []}

        resp = client.post(QUERY_PATH, json={"action": "bodyPart", "bodyPart": "chest"})

        assert resp.status_code == 200
        assert resp.get_json() == {"success": True, "data": []}
        assert resp.headers["X-Catalog-Provider"] == "fallback"

    def test_both_failed_is_bad_gateway(self, client, providers):
        primary, fallback = providers
        primary.error = http_error("primary", 500)
        fallback.error = http_error("fallback", 503)

        resp = client.post(QUERY_PATH, json={"action": "byId", "id": "0001"})

        assert resp.status_code == 502
        assert resp.get_json() == {
            "error": "ExerciseDB failed: primary error: 500; fallback error: 503",
            "primaryError": "primary error: 500",
            "fallbackError": "fallback error: 503",
        }

    def test_unexpected_error_is_500(self, client, providers):
        providers[0].error = RuntimeError("boom")
        resp = client.post(QUERY_PATH, json={"action": "target", "target": "abs"})
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "boom"}

    def test_get_not_allowed(self, client):
        assert client.get(QUERY_PATH).status_code == 405


# =============================================================================
# IMAGE RELAY
# =============================================================================


class TestImageRoute:

    def test_requires_id(self, client, image_provider):
        resp = client.get("/exercise-catalog/image")
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "id required"}
        image_provider.fetch_image.assert_not_called()

    def test_success(self, client, image_provider):
        image_provider.fetch_image.return_value = (b"GIF89a", "image/gif")

        resp = client.get("/exercise-catalog/image?id=0001&resolution=720")

        assert resp.status_code == 200
        assert resp.data == b"GIF89a"
        assert resp.headers["Content-Type"] == "image/gif"
        assert resp.headers["Cache-Control"] == "public, max-age=86400"
        image_provider.fetch_image.assert_called_once_with("0001", "720")

    def test_not_configured(self, client, image_provider):
        image_provider.fetch_image.side_effect = NotConfigured("RapidAPI", "EXERCISEDB_RAPIDAPI_KEY")
        assert client.get("/exercise-catalog/image?id=0001").status_code == 503

    def test_upstream_404(self, client, image_provider):
        image_provider.fetch_image.side_effect = UpstreamError("RapidAPI error: 404", status_code=404)
        assert client.get("/exercise-catalog/image?id=nope").status_code == 404

    def test_upstream_other_failure(self, client, image_provider):
        image_provider.fetch_image.side_effect = UpstreamError("RapidAPI request failed: timeout")
        resp = client.get("/exercise-catalog/image?id=0001")
        assert resp.status_code == 502
        assert resp.get_json() == {"error": "ExerciseDB image failed"}

    def test_defaults_to_orchestrator_primary(self):
        primary = RapidApiProvider(api_key=None)
        app = create_app(
            settings=CatalogSettings(),
            orchestrator=FailoverOrchestrator(primary, FakeProvider("fallback")),
        )
        resp = app.test_client().get("/exercise-catalog/image?id=0001")
        assert resp.status_code == 503


# =============================================================================
# REFERENCE DATA
# =============================================================================


class TestReferenceRoutes:

    def test_body_parts(self, client):
        data = client.get("/exercise-catalog/body-parts").get_json()
        assert data["success"] is True
        assert "CHEST" in data["data"]

    def test_equipment(self, client):
        data = client.get("/exercise-catalog/equipment").get_json()
        assert "DUMBBELL" in data["data"]
