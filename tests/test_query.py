"""Tests for CatalogQuery parsing and dispatch."""

import pytest

from conftest import FakeProvider
from exercise_catalog.errors import InvalidArgument
from exercise_catalog.query import CatalogQuery


class TestFromPayload:

    def test_search(self):
        query = CatalogQuery.from_payload({"action": "search", "query": " squat ", "limit": 5})
        assert query == CatalogQuery("search", "squat", 5)

    def test_default_limit(self):
        assert CatalogQuery.from_payload({"action": "bodyPart", "bodyPart": "chest"}).limit == 20
        assert CatalogQuery.from_payload({"action": "bodyPart", "bodyPart": "chest", "limit": None}).limit == 20

    def test_each_action_reads_its_parameter(self):
        payloads = {
            "search": "query",
            "bodyPart": "bodyPart",
            "equipment": "equipment",
            "target": "target",
            "byId": "id",
        }
        for action, key in payloads.items():
            query = CatalogQuery.from_payload({"action": action, key: "x"})
            assert query.value == "x"
            assert query.parameter == key

    def test_unknown_action(self):
        with pytest.raises(InvalidArgument) as exc:
            CatalogQuery.from_payload({"action": "bogus"})
        assert exc.value.parameter == "action"
        assert str(exc.value) == "Invalid action"

    @pytest.mark.parametrize("action", [["search"], {}, {"search": 1}, 3, None])
    def test_non_string_action(self, action):
        with pytest.raises(InvalidArgument) as exc:
            CatalogQuery.from_payload({"action": action, "query": "squat"})
        assert str(exc.value) == "Invalid action"

    def test_non_string_action_on_construction(self):
        with pytest.raises(InvalidArgument):
            CatalogQuery(["search"], "squat")

    def test_missing_parameter_message(self):
        with pytest.raises(InvalidArgument) as exc:
            CatalogQuery.from_payload({"action": "search"})
        assert str(exc.value) == "query required"

    def test_wrong_key_for_action(self):
        with pytest.raises(InvalidArgument):
            CatalogQuery.from_payload({"action": "equipment", "bodyPart": "chest"})

    def test_non_object_body(self):
        with pytest.raises(InvalidArgument):
            CatalogQuery.from_payload(["search"])

    @pytest.mark.parametrize("limit", ["many", "5", 5.9, 5.0, True, 0, -1, [5]])
    def test_bad_limit(self, limit):
        with pytest.raises(InvalidArgument) as exc:
            CatalogQuery.from_payload({"action": "search", "query": "a", "limit": limit})
        assert exc.value.parameter == "limit"


class TestToPayload:

    def test_list_query_includes_limit(self):
        assert CatalogQuery("target", "abs", 7).to_payload() == {"action": "target", "target": "abs", "limit": 7}

    def test_by_id_omits_limit(self):
        assert CatalogQuery("byId", "0001").to_payload() == {"action": "byId", "id": "0001"}


class TestDispatch:

    def test_routes_to_matching_provider_method(self):
        provider = FakeProvider("fake", response=[])
        CatalogQuery("search", "row", 3).dispatch(provider)
        CatalogQuery("bodyPart", "back").dispatch(provider)
        CatalogQuery("equipment", "cable").dispatch(provider)
        CatalogQuery("byId", "ex 1").dispatch(provider)

        assert provider.calls == [
            ("/exercises/name/row", {"limit": 3}),
            ("/exercises/bodyPart/BACK", {"limit": 20}),
            ("/exercises/equipment/CABLE", {"limit": 20}),
            ("/exercises/ex%201", None),
        ]
