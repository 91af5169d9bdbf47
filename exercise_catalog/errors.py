"""
Catalog Errors - Exception taxonomy for the ExerciseDB integration layer.

Propagation:
- InvalidArgument: raised before any I/O, surfaced to the caller
- NotConfigured: primary credential missing, recovered by fallback
- UpstreamError: non-2xx or transport failure from one provider
- BothProvidersFailed: terminal, carries both underlying messages
- MalformedResponse: unrecognized envelope, recovered as "no results"
- InvalidSetting: unusable configuration, raised when settings are built
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Base class for exercise catalog errors."""


class InvalidArgument(CatalogError):
    """Raised when a required query parameter is missing or empty."""

    def __init__(self, parameter: str, reason: str = "required", message: Optional[str] = None):
        super().__init__(message or f"{parameter} {reason}")
        self.parameter = parameter
        self.reason = reason


class NotConfigured(CatalogError):
    """Raised when a provider cannot resolve its credential."""

    def __init__(self, provider: str, setting: str):
        super().__init__(f"{provider} not configured ({setting} not set)")
        self.provider = provider
        self.setting = setting


class UpstreamError(CatalogError):
    """Raised when a provider returns non-2xx or the transport fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        provider: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.provider = provider
        # Decoded JSON error body, when the response had one
        self.details = details


class BothProvidersFailed(CatalogError):
    """Raised when primary and fallback providers both fail."""

    def __init__(self, primary_error: str, fallback_error: str):
        super().__init__(f"ExerciseDB failed: {primary_error}; {fallback_error}")
        self.primary_error = primary_error
        self.fallback_error = fallback_error


class MalformedResponse(CatalogError):
    """Raised internally when a payload matches no known envelope shape."""

    def __init__(self, shape: str):
        super().__init__(f"Unrecognized response shape: {shape}")
        self.shape = shape


class InvalidSetting(CatalogError):
    """Raised when a configuration value cannot be used."""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(f"{setting}={value!r} {reason}")
        self.setting = setting
        self.value = value
        self.reason = reason
