"""HTTP connection manager.

Owns the aiohttp session used to talk to one camera and translates transport
and decoding failures into SDK exceptions.
"""

from __future__ import annotations

__all__ = ["HttpConnectionManager"]

import asyncio
import contextlib
import json
import logging
from collections.abc import AsyncIterator
from typing import Any

import aiohttp

from ..config import TimeoutConfig
from ..exceptions import NotConnectedError, ThetaWebApiError

logger = logging.getLogger(__name__)

# Failures meaning the camera could not be reached or the exchange broke off
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)


class HttpConnectionManager:
    """HTTP connection manager.

    Responsibilities:
    - Create the aiohttp session lazily and close it
    - Send JSON requests and decode JSON responses
    - Map failures to ``NotConnectedError`` (camera unreachable) or
      ``ThetaWebApiError`` (camera reached, reply rejected or unreadable)
    """

    def __init__(self, endpoint: str, timeout_config: TimeoutConfig) -> None:
        """Initialize HTTP connection manager.

        Args:
            endpoint: Camera base URL, e.g. ``http://192.168.1.1``
            timeout_config: Timeout configuration
        """
        self.endpoint = endpoint
        self._timeout = timeout_config
        self._session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> str:
        return self.endpoint.rstrip("/")

    @property
    def is_connected(self) -> bool:
        """Whether an HTTP session is open."""
        return self._session is not None and not self._session.closed

    async def connect(self) -> None:
        """Create the HTTP session (no request is sent)."""
        if self.is_connected:
            logger.debug(f"HTTP session for {self.base_url} already open, skipping")
            return

        self._session = aiohttp.ClientSession(timeout=self._timeout.to_client_timeout())
        logger.debug(f"HTTP session for {self.base_url} created")

    async def disconnect(self) -> None:
        """Close the HTTP session."""
        if not self.is_connected:
            logger.debug(f"HTTP session for {self.base_url} not open, skipping")
            return

        assert self._session is not None
        await self._session.close()
        self._session = None
        logger.info(f"HTTP session for {self.base_url} closed")

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str) -> Any:
        """Send a GET request and decode the JSON response.

        Raises:
            NotConnectedError: Transport failure
            ThetaWebApiError: Non-2xx status or body that is not JSON
        """
        return await self._request("GET", path)

    async def post_json(self, path: str, body: dict[str, Any] | None = None) -> Any:
        """Send a POST request with a JSON body and decode the JSON response.

        Raises:
            NotConnectedError: Transport failure
            ThetaWebApiError: Non-2xx status or body that is not JSON
        """
        return await self._request("POST", path, body)

    @contextlib.asynccontextmanager
    async def stream(self, path: str, body: dict[str, Any] | None = None) -> AsyncIterator[aiohttp.ClientResponse]:
        """Open a streaming POST response (live preview).

        The response is released when the context exits, including on
        cancellation. The overall request timeout does not apply; only the
        connect and per-read timeouts do.

        Usage example:
            async with self.http.stream("osc/commands/execute", body) as resp:
                async for chunk in resp.content.iter_any():
                    ...
        """
        if not self.is_connected:
            await self.connect()
        assert self._session is not None

        url = self.url(path)
        logger.debug(f"POST (stream) {url} {body}")
        try:
            async with self._session.post(url, json=body, timeout=self._timeout.to_preview_timeout()) as resp:
                if not 200 <= resp.status < 300:
                    raw = await resp.read()
                    raise _status_error(resp.status, resp.reason, raw.decode("utf-8", errors="replace"))
                yield resp
        except TRANSPORT_ERRORS as e:
            raise NotConnectedError(str(e) or type(e).__name__) from e

    async def _request(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        # Lazy connection: create the session on first request
        if not self.is_connected:
            await self.connect()
        assert self._session is not None

        url = self.url(path)
        logger.debug(f"{method} {url} {body if body is not None else ''}")
        try:
            async with self._session.request(method, url, json=body) as resp:
                status, reason = resp.status, resp.reason
                raw = await resp.read()
        except TRANSPORT_ERRORS as e:
            raise NotConnectedError(str(e) or type(e).__name__) from e

        text = raw.decode("utf-8", errors="replace")
        logger.debug(f"{method} {url} -> HTTP {status}: {text}")
        if not 200 <= status < 300:
            raise _status_error(status, reason, text)

        # Invalid UTF-8 raises UnicodeDecodeError, a ValueError
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise ThetaWebApiError(f"Illegal JSON response from {url}: {e}") from e


def _status_error(status: int, reason: str | None, text: str) -> ThetaWebApiError:
    """Build the error for a non-2xx reply.

    The camera usually sends an error envelope; its message is preferred.
    """
    try:
        data = json.loads(text)
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return ThetaWebApiError(str(error["message"]))

    return ThetaWebApiError(f"Camera returned HTTP {status} ({reason}): {text[:200]}")
