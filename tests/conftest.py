"""Shared fakes for exercise catalog tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest

from exercise_catalog.errors import UpstreamError
from exercise_catalog.failover import FailoverOrchestrator
from exercise_catalog.providers.base import ExerciseProvider


class FakeProvider(ExerciseProvider):
    """In-memory provider that returns a canned response or raises."""

    def __init__(
        self,
        name: str,
        response: Any = None,
        error: Optional[Exception] = None,
        configured: bool = True,
    ):
        self.name = name
        self.response = response
        self.error = error
        self.configured = configured
        self.calls: List[Tuple[str, Optional[Dict[str, Any]]]] = []

    def is_configured(self) -> bool:
        return self.configured

    def _request(self, path, params=None):
        self.calls.append((path, params))
        if self.error is not None:
            raise self.error
        return self.response

    def _search_request(self, query, limit):
        return f"/exercises/name/{query}", {"limit": limit}


def http_error(provider: str, status: int) -> UpstreamError:
    return UpstreamError(f"{provider} error: {status}", status_code=status, provider=provider)


def fake_response(status: int = 200, json_data: Any = None, content: bytes = b"", headers=None):
    """A stand-in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.reason = "OK" if resp.ok else "Error"
    resp.headers = headers or {"Content-Type": "application/json"}
    resp.content = content
    if json_data is None:
        resp.json.side_effect = ValueError("No JSON")
        resp.text = content.decode("utf-8", errors="ignore")
    else:
        resp.json.return_value = json_data
        resp.text = str(json_data)
    return resp


@pytest.fixture
def envelope():
    return {
        "success": True,
        "data": [
            {
                "exerciseId": "ex_123",
                "name": "Barbell Bench Press",
                "bodyParts": ["chest"],
                "equipments": ["barbell"],
                "targetMuscles": ["pectorals"],
                "gifUrl": "ex_123.gif",
            }
        ],
    }


@pytest.fixture
def make_orchestrator():
    def _make(primary: FakeProvider, fallback: FakeProvider) -> FailoverOrchestrator:
        return FailoverOrchestrator(primary, fallback)
    return _make
