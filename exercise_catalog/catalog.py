"""
Exercise Catalog - Public facade over the integration layer.

Two implementations of one interface, selected by the composition root:
- DirectCatalog: server side, calls the failover orchestrator directly
- RemoteCatalog: browser side, speaks the proxy protocol so upstream
  credentials never leave the server

Both return raw JSON from fetch() and share the same normalizer for the
typed query methods.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from exercise_catalog.config import PROXY_PATH, CatalogSettings
from exercise_catalog.errors import BothProvidersFailed, UpstreamError
from exercise_catalog.failover import FailoverOrchestrator
from exercise_catalog.libs.http import HttpClient
from exercise_catalog.models import CanonicalExercise
from exercise_catalog.normalizer import normalize_many, normalize_single
from exercise_catalog.providers import DEFAULT_LIMIT, ExerciseDbV2Provider, RapidApiProvider
from exercise_catalog.query import (
    ACTION_BODY_PART,
    ACTION_BY_ID,
    ACTION_EQUIPMENT,
    ACTION_SEARCH,
    ACTION_TARGET,
    CatalogQuery,
)
from exercise_catalog.reference import body_parts, equipment_list

logger = logging.getLogger(__name__)


class ExerciseCatalog(ABC):
    """
    Abstract exercise catalog.

    Implementations:
    - DirectCatalog: server-side orchestrator
    - RemoteCatalog: proxy client
    """

    @abstractmethod
    def fetch(self, query: CatalogQuery) -> Any:
        """Run a query and return the provider's raw JSON."""
        pass

    def search_exercises(self, query: str, limit: int = DEFAULT_LIMIT) -> List[CanonicalExercise]:
        return normalize_many(self.fetch(CatalogQuery(ACTION_SEARCH, query, limit)))

    def exercises_by_body_part(self, part: str, limit: int = DEFAULT_LIMIT) -> List[CanonicalExercise]:
        return normalize_many(self.fetch(CatalogQuery(ACTION_BODY_PART, part, limit)))

    def exercises_by_equipment(self, equipment: str, limit: int = DEFAULT_LIMIT) -> List[CanonicalExercise]:
        return normalize_many(self.fetch(CatalogQuery(ACTION_EQUIPMENT, equipment, limit)))

    def exercises_by_target(self, target: str, limit: int = DEFAULT_LIMIT) -> List[CanonicalExercise]:
        return normalize_many(self.fetch(CatalogQuery(ACTION_TARGET, target, limit)))

    def get_exercise(self, exercise_id: str) -> Optional[CanonicalExercise]:
        return normalize_single(self.fetch(CatalogQuery(ACTION_BY_ID, exercise_id)))

    def body_parts(self) -> List[str]:
        return body_parts()

    def equipment_list(self) -> List[str]:
        return equipment_list()


class DirectCatalog(ExerciseCatalog):
    """Server-side catalog backed by the failover orchestrator."""

    def __init__(self, orchestrator: FailoverOrchestrator):
        self.orchestrator = orchestrator

    def fetch(self, query: CatalogQuery) -> Any:
        return self.orchestrator.execute(query).data


class RemoteCatalog(ExerciseCatalog):
    """Browser-side catalog that relays queries through the proxy."""

    def __init__(self, base_url: str, path: str = PROXY_PATH, timeout_seconds: Optional[float] = None):
        self.path = path
        self._http = HttpClient(
            base_url=base_url,
            provider="Catalog proxy",
            timeout_seconds=timeout_seconds,
        )

    def fetch(self, query: CatalogQuery) -> Any:
        """
        Post the query to the proxy.

        Raises:
            BothProvidersFailed: Proxy reported that both providers failed
            UpstreamError: Any other non-2xx or transport failure
        """
        logger.debug("Proxy request: action=%s", query.action)
        try:
            return self._http.post(self.path, query.to_payload())
        except UpstreamError as e:
            details = e.details or {}
            if e.status_code == 502 and "primaryError" in details and "fallbackError" in details:
                raise BothProvidersFailed(
                    str(details["primaryError"]), str(details["fallbackError"]),
                ) from e
            raise


def build_orchestrator(settings: Optional[CatalogSettings] = None) -> FailoverOrchestrator:
    """Compose the RapidAPI primary and v2 fallback from settings."""
    settings = settings or CatalogSettings.from_env()
    primary = RapidApiProvider(
        api_key=settings.rapidapi_key,
        base_url=settings.rapidapi_base_url,
        host=settings.rapidapi_host,
        timeout_seconds=settings.timeout_seconds,
    )
    fallback = ExerciseDbV2Provider(
        base_url=settings.fallback_base_url,
        timeout_seconds=settings.timeout_seconds,
    )
    if not primary.is_configured():
        logger.info("RapidAPI key not set; queries will use %s", fallback.name)
    return FailoverOrchestrator(primary, fallback)


def build_direct_catalog(settings: Optional[CatalogSettings] = None) -> DirectCatalog:
    return DirectCatalog(build_orchestrator(settings))


def build_remote_catalog(settings: Optional[CatalogSettings] = None) -> RemoteCatalog:
    settings = settings or CatalogSettings.from_env()
    return RemoteCatalog(settings.proxy_base_url, timeout_seconds=settings.timeout_seconds)
