"""
Failover Orchestrator - Primary provider with a single fallback hop.

States:
- PrimaryAttempt: primary configured and 2xx -> success
- PrimaryAttempt -> FallbackAttempt: primary not configured, non-2xx, or
  transport failure (reason captured)
- FallbackAttempt: fallback 2xx -> success, else BothProvidersFailed

The fallback is tried on any primary failure, not only specific status
codes. No retries beyond the single hop and no backoff.
"""

from __future__ import annotations

import logging
from typing import Any

from exercise_catalog.errors import BothProvidersFailed, NotConfigured, UpstreamError
from exercise_catalog.models import FailoverResult
from exercise_catalog.providers.base import DEFAULT_LIMIT, ExerciseProvider
from exercise_catalog.query import (
    ACTION_BODY_PART,
    ACTION_BY_ID,
    ACTION_EQUIPMENT,
    ACTION_SEARCH,
    ACTION_TARGET,
    CatalogQuery,
)

logger = logging.getLogger(__name__)


class FailoverOrchestrator:
    """Routes a query to the primary provider, falling back on failure."""

    def __init__(self, primary: ExerciseProvider, fallback: ExerciseProvider):
        self.primary = primary
        self.fallback = fallback

    def execute(self, query: CatalogQuery) -> FailoverResult:
        """
        Run a query with failover.

        Returns:
            FailoverResult with the raw JSON and the provider that served it

        Raises:
            BothProvidersFailed: Primary and fallback both failed
        """
        if not self.primary.is_configured():
            primary_error = f"{self.primary.name} not configured"
        else:
            try:
                data = query.dispatch(self.primary)
            except (NotConfigured, UpstreamError) as e:
                primary_error = str(e)
            else:
                logger.debug("%s served %s", self.primary.name, query.action)
                return FailoverResult(data=data, provider=self.primary.name)

        logger.warning(
            "%s request failed, trying %s: %s",
            self.primary.name, self.fallback.name, primary_error,
        )
        try:
            data = query.dispatch(self.fallback)
        except (NotConfigured, UpstreamError) as e:
            logger.error(
                "%s and %s both failed for %s: %s; %s",
                self.primary.name, self.fallback.name, query.action, primary_error, e,
            )
            raise BothProvidersFailed(primary_error, str(e)) from e

        logger.info("%s served %s via fallback", self.fallback.name, query.action)
        return FailoverResult(data=data, provider=self.fallback.name, primary_error=primary_error)

    # Convenience wrappers returning the raw JSON only

    def search_by_name(self, query: str, limit: int = DEFAULT_LIMIT) -> Any:
        return self.execute(CatalogQuery(ACTION_SEARCH, query, limit)).data

    def by_body_part(self, part: str, limit: int = DEFAULT_LIMIT) -> Any:
        return self.execute(CatalogQuery(ACTION_BODY_PART, part, limit)).data

    def by_equipment(self, equipment: str, limit: int = DEFAULT_LIMIT) -> Any:
        return self.execute(CatalogQuery(ACTION_EQUIPMENT, equipment, limit)).data

    def by_target(self, target: str, limit: int = DEFAULT_LIMIT) -> Any:
        return self.execute(CatalogQuery(ACTION_TARGET, target, limit)).data

    def by_id(self, exercise_id: str) -> Any:
        return self.execute(CatalogQuery(ACTION_BY_ID, exercise_id)).data
