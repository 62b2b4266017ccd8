"""
Live HTTP capture.

This module sends an HTTPRequest with aiohttp and captures the reply as
an HTTPResponse whose body is held in memory, ready for assertions.
"""

from __future__ import annotations

import asyncio
import logging

import aiohttp
from multidict import CIMultiDict

from .duplication import copy_request
from .models import HTTPRequest, HTTPResponse, body_stream

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000


class TransportError(Exception):
    """The request could not be sent or the response could not be read."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


def capture_response(response: aiohttp.ClientResponse, body: bytes) -> HTTPResponse:
    """Build an HTTPResponse from an aiohttp response and its read body."""
    version = response.version
    http_version = f"HTTP/{version.major}.{version.minor}" if version else "HTTP/1.1"
    return HTTPResponse(
        status_code=response.status,
        reason=response.reason or "",
        headers=CIMultiDict(response.headers),
        body=body_stream(body),
        http_version=http_version,
        content_length=len(body),
    )


class HTTPClient:
    """
    Reusable client around a single aiohttp session.

    Example:
        async with HTTPClient() as client:
            response = await client.send(HTTPRequest(url="http://localhost:8000/hello"))
    """

    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.timeout_ms = timeout_ms
        self._session: aiohttp.ClientSession | None = None

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    async def connect(self) -> None:
        """Create the HTTP session."""
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.timeout_ms / 1000)
            self._session = aiohttp.ClientSession(timeout=timeout)

    async def disconnect(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def send(self, request: HTTPRequest) -> HTTPResponse:
        """Send a request over the open session and capture the response."""
        if self._session is None:
            raise TransportError("Client not connected. Call connect() first.", url=str(request.url))

        outgoing = copy_request(request)
        data = outgoing.body.read() if outgoing.body is not None else None
        url = str(request.url)
        logger.info(f"{request.method} {url}")

        try:
            async with self._session.request(
                request.method, url, headers=outgoing.headers, data=data
            ) as resp:
                body = await resp.read()
                response = capture_response(resp, body)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out after {self.timeout_ms}ms", url=url) from e
        except aiohttp.ClientConnectorError as e:
            raise TransportError(f"Connection failed: {e}", url=url) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP error: {e}", url=url) from e

        logger.info(f"{response.status_code} {response.reason} ({response.content_length} bytes)")
        return response

    async def __aenter__(self) -> HTTPClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()

    def __repr__(self) -> str:
        status = "connected" if self.is_connected else "disconnected"
        return f"HTTPClient(timeout_ms={self.timeout_ms}, status={status})"


async def fetch(request: HTTPRequest, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> HTTPResponse:
    """
    Send a single request and capture the full response.

    The request's own body stays readable afterwards.

    Args:
        request: The request to send
        timeout_ms: Total timeout in milliseconds

    Returns:
        HTTPResponse with an in-memory body

    Raises:
        TransportError: On timeouts and client errors
    """
    async with HTTPClient(timeout_ms=timeout_ms) as client:
        return await client.send(request)
