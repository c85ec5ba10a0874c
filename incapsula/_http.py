"""Thin HTTP client wrapping requests.Session with query-string credentials."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any

import requests

from ._config import Config
from ._exceptions import TransportError

logger = logging.getLogger(__name__)

# requests exceptions echo the full URL, credentials included
_API_KEY_PARAM = re.compile(r"api_key=[^&\s'\"]*")


@dataclass(frozen=True)
class RawResponse:
    """Status, headers, and undecoded body of one HTTP exchange."""

    status_code: int
    headers: dict[str, str]
    body: str


class HTTPClient:
    """One long-lived session plus immutable connection settings.

    Every request gets ``api_id`` and ``api_key`` appended to its query
    string, after the caller's own parameters. Each call is a single
    attempt; failures before a response arrives raise TransportError.
    """

    def __init__(self, config: Config, timeout: float = 60):
        self._config = config
        self._session = requests.Session()
        self._session.headers["Content-Type"] = "application/json"
        self._session.headers["Accept"] = "application/json"
        self._base_url = config.base_url.rstrip("/")
        self._timeout = timeout

    @property
    def config(self) -> Config:
        return self._config

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: str | None = None,
    ) -> RawResponse:
        """Send one request and return the raw response, whatever its status."""
        query = dict(params or {})
        query["api_id"] = self._config.api_id
        query["api_key"] = self._config.api_key
        url = self.url_for(path)

        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(
                method, url, params=query, data=data, timeout=self._timeout
            )
        except requests.RequestException as e:
            message = _API_KEY_PARAM.sub("api_key=***", str(e))
            logger.warning("%s %s failed: %s", method, url, message)
            raise TransportError(message, cause=e) from e

        try:
            return RawResponse(
                status_code=resp.status_code,
                headers=dict(resp.headers),
                body=resp.text,
            )
        finally:
            resp.close()

    def get(self, path: str, **kwargs: Any) -> RawResponse:
        return self.send("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> RawResponse:
        return self.send("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> RawResponse:
        return self.send("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> RawResponse:
        return self.send("DELETE", path, **kwargs)
