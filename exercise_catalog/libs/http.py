from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import requests

from exercise_catalog.config import check_timeout
from exercise_catalog.errors import UpstreamError


@dataclass
class HttpClient:
    base_url: str
    provider: str = "http"
    default_headers: Dict[str, str] = field(default_factory=dict)
    timeout_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        self.timeout_seconds = check_timeout(self.timeout_seconds)

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        headers.update(self.default_headers)
        if extra:
            headers.update(extra)
        return headers

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        base = self.base_url.rstrip("/")
        p = path.lstrip("/")
        return f"{base}/{p}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        url = self._url(path)
        try:
            resp = requests.get(url, params=params or None, headers=self._headers(headers), timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise UpstreamError(f"{self.provider} request failed: {e}", provider=self.provider) from e
        return self._handle_response(resp)

    def post(self, path: str, json_body: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        url = self._url(path)
        post_headers = {"Content-Type": "application/json"}
        if headers:
            post_headers.update(headers)
        try:
            resp = requests.post(url, json=json_body or {}, headers=self._headers(post_headers), timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise UpstreamError(f"{self.provider} request failed: {e}", provider=self.provider) from e
        return self._handle_response(resp)

    def get_bytes(self, path: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Tuple[bytes, str]:
        """GET a binary resource. Returns (body, content type)."""
        url = self._url(path)
        try:
            resp = requests.get(url, params=params or None, headers=self._headers(headers), timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise UpstreamError(f"{self.provider} request failed: {e}", provider=self.provider) from e
        if not resp.ok:
            raise UpstreamError(
                f"{self.provider} error: {resp.status_code} {resp.reason or ''}".rstrip(),
                status_code=resp.status_code,
                provider=self.provider,
            )
        return resp.content, resp.headers.get("Content-Type", "application/octet-stream")

    def _handle_response(self, resp: requests.Response) -> Any:
        text = resp.text
        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.ok:
            err = data.get("error") if isinstance(data, dict) else None
            if isinstance(err, dict):
                err = err.get("message")
            message = err or f"{resp.status_code} {resp.reason or ''}".rstrip()
            raise UpstreamError(
                f"{self.provider} error: {message}",
                status_code=resp.status_code,
                provider=self.provider,
                details=data if isinstance(data, dict) else None,
            )
        if data is None:
            raise UpstreamError(
                f"{self.provider} returned non-JSON body: {text[:200]!r}",
                status_code=resp.status_code,
                provider=self.provider,
            )
        return data


def encode_segment(value: str) -> str:
    """Percent-encode a single URL path segment."""
    return quote(value, safe="")


__all__ = ["HttpClient", "encode_segment"]
