"""Transport -- the single place where tgbind talks HTTP.

Calls use the ``requests`` library; the async entry points offload the
blocking I/O via :func:`asyncio.to_thread` so the event loop is never
blocked.  No retries and no caching: one invocation is one outbound request.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _endpoint(url: str) -> str:
    """Last path segment of *url*; the token-bearing prefix is never logged."""
    return url.rsplit("/", 1)[-1]


class Transport:
    """HTTP transport backed by a :class:`requests.Session`.

    The Bot API reports failures inside the response envelope, so the raw
    body is returned whatever the HTTP status.  Connection, TLS and timeout
    failures propagate as :class:`requests.RequestException`.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
        """Create a transport.

        Args:
            session: Session to send requests through; a new one is created
                when omitted.
            timeout: Per-request timeout in seconds; ``None`` keeps the
                ``requests`` default.
        """
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    # ------------------------------------------------------------------
    #  Blocking calls
    # ------------------------------------------------------------------

    def get(self, url: str) -> bytes:
        response = self._session.get(url, timeout=self._timeout)
        logger.debug("HTTP GET done", extra={"api_endpoint": _endpoint(url), "status_code": response.status_code})
        return response.content

    def post(self, url: str, body: str) -> bytes:
        response = self._session.post(url, data=body.encode("utf-8"), headers=_JSON_HEADERS, timeout=self._timeout)
        logger.debug("HTTP POST done", extra={"api_endpoint": _endpoint(url), "status_code": response.status_code})
        return response.content

    def fetch(self, url: str) -> bytes:
        """GET *url* and fail on a non-2xx status (file downloads have no envelope).

        Raises:
            requests.HTTPError: If the HTTP response status is not 2xx.
        """
        response = self._session.get(url, timeout=self._timeout)
        response.raise_for_status()
        return response.content

    # ------------------------------------------------------------------
    #  Async entry points
    # ------------------------------------------------------------------

    async def request(self, http_method: str, url: str, body: Optional[str] = None) -> bytes:
        """Run one GET or POST in a worker thread and return the raw body.

        *http_method* is the HTTP verb (``"GET"`` or ``"POST"``).
        """
        verb = http_method.upper()
        if verb == "GET":
            return await asyncio.to_thread(self.get, url)
        if verb == "POST":
            return await asyncio.to_thread(self.post, url, body if body is not None else "{}")
        raise ValueError(f"unsupported HTTP method: {http_method!r}")

    async def download(self, url: str) -> bytes:
        """Download raw bytes from the file CDN."""
        return await asyncio.to_thread(self.fetch, url)

    def close(self) -> None:
        """Release the pooled connections of the underlying session."""
        self._session.close()
