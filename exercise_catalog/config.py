"""
Catalog Settings - Environment-backed configuration.

Settings are read once into an immutable CatalogSettings and injected into
the provider clients, so nothing below the composition root touches the
process environment.

Environment:
- EXERCISEDB_RAPIDAPI_KEY (falls back to NEXT_PUBLIC_EXERCISEDB_RAPIDAPI_KEY)
- EXERCISEDB_RAPIDAPI_BASE_URL / EXERCISEDB_RAPIDAPI_HOST
- EXERCISEDB_FALLBACK_BASE_URL
- EXERCISEDB_TIMEOUT_SECONDS (unset = no explicit timeout; else a positive number)
- EXERCISE_CATALOG_PROXY_BASE_URL (used by RemoteCatalog)
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from exercise_catalog.errors import InvalidSetting

RAPIDAPI_BASE_URL = "https://exercisedb.p.rapidapi.com"
RAPIDAPI_HOST = "exercisedb.p.rapidapi.com"
FALLBACK_BASE_URL = "https://v2.exercisedb.dev"
PROXY_PATH = "/exercise-catalog/query"
PROXY_BASE_URL = "http://localhost:8080"

API_KEY_VAR = "EXERCISEDB_RAPIDAPI_KEY"
PUBLIC_API_KEY_VAR = "NEXT_PUBLIC_EXERCISEDB_RAPIDAPI_KEY"
TIMEOUT_VAR = "EXERCISEDB_TIMEOUT_SECONDS"


def check_timeout(value: Any, setting: str = "timeout_seconds") -> Optional[float]:
    """
    Validate an HTTP timeout.

    None means no explicit timeout. Anything else must be a positive,
    finite number.

    Raises:
        InvalidSetting: Not a number, zero or negative, NaN or infinite
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSetting(setting, value, "must be a positive number of seconds")
    if not math.isfinite(value) or value <= 0:
        raise InvalidSetting(setting, value, "must be a positive number of seconds")
    return float(value)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise InvalidSetting(TIMEOUT_VAR, raw, "must be a positive number of seconds")
    return check_timeout(value, TIMEOUT_VAR)


@dataclass(frozen=True)
class CatalogSettings:
    """Provider endpoints and credentials."""
    rapidapi_key: Optional[str] = None
    rapidapi_base_url: str = RAPIDAPI_BASE_URL
    rapidapi_host: str = RAPIDAPI_HOST
    fallback_base_url: str = FALLBACK_BASE_URL
    timeout_seconds: Optional[float] = None
    proxy_base_url: str = PROXY_BASE_URL

    def __post_init__(self) -> None:
        object.__setattr__(self, "timeout_seconds", check_timeout(self.timeout_seconds))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CatalogSettings":
        """
        Build settings from environment variables.

        Raises:
            InvalidSetting: EXERCISEDB_TIMEOUT_SECONDS is set but unusable
        """
        env = os.environ if environ is None else environ
        key = env.get(API_KEY_VAR) or env.get(PUBLIC_API_KEY_VAR) or None
        return cls(
            rapidapi_key=key.strip() if key and key.strip() else None,
            rapidapi_base_url=env.get("EXERCISEDB_RAPIDAPI_BASE_URL", RAPIDAPI_BASE_URL),
            rapidapi_host=env.get("EXERCISEDB_RAPIDAPI_HOST", RAPIDAPI_HOST),
            fallback_base_url=env.get("EXERCISEDB_FALLBACK_BASE_URL", FALLBACK_BASE_URL),
            timeout_seconds=_parse_timeout(env.get(TIMEOUT_VAR)),
            proxy_base_url=env.get("EXERCISE_CATALOG_PROXY_BASE_URL", PROXY_BASE_URL),
        )

    @property
    def has_rapidapi_key(self) -> bool:
        return bool(self.rapidapi_key)
