"""
HTTP exchange models.

This module defines the response and request objects assertions are
evaluated against. Bodies are binary streams that can be read once;
use the duplication helpers to get independent copies.
"""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from typing import Any, BinaryIO

from multidict import CIMultiDict
from yarl import URL


def body_stream(content: bytes | str | None) -> BinaryIO | None:
    """Wrap raw content in a readable stream."""
    if content is None:
        return None
    if isinstance(content, str):
        content = content.encode("utf-8")
    return io.BytesIO(content)


@dataclass
class HTTPResponse:
    """An HTTP response with a single-read body stream."""
    status_code: int = 200
    reason: str = "OK"
    headers: CIMultiDict = field(default_factory=CIMultiDict)
    body: BinaryIO | None = None
    http_version: str = "HTTP/1.1"
    content_length: int | None = None

    @classmethod
    def from_json(cls, data: Any, status_code: int = 200, **kwargs: Any) -> HTTPResponse:
        """Build a response whose body is the JSON encoding of data."""
        content = json.dumps(data).encode("utf-8")
        headers = CIMultiDict({"Content-Type": "application/json"})
        return cls(
            status_code=status_code,
            headers=headers,
            body=body_stream(content),
            content_length=len(content),
            **kwargs,
        )

    @classmethod
    def from_bytes(cls, content: bytes | str, status_code: int = 200, **kwargs: Any) -> HTTPResponse:
        """Build a response around raw body content."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        return cls(
            status_code=status_code,
            body=body_stream(content),
            content_length=len(content),
            **kwargs,
        )


@dataclass
class HTTPRequest:
    """An HTTP request with a single-read body stream."""
    method: str = "GET"
    url: URL = field(default_factory=URL)
    headers: CIMultiDict = field(default_factory=CIMultiDict)
    body: BinaryIO | None = None
    host: str | None = None
    http_version: str = "HTTP/1.1"
    content_length: int | None = None
    remote_addr: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.url, str):
            self.url = URL(self.url)
        if not isinstance(self.headers, CIMultiDict):
            self.headers = CIMultiDict(self.headers)
        if self.host is None and self.url.host:
            self.host = self.url.host

    @classmethod
    def from_json(cls, method: str, url: str | URL, data: Any, **kwargs: Any) -> HTTPRequest:
        """Build a request whose body is the JSON encoding of data."""
        content = json.dumps(data).encode("utf-8")
        headers = CIMultiDict(kwargs.pop("headers", {}))
        headers.setdefault("Content-Type", "application/json")
        return cls(
            method=method,
            url=url,
            headers=headers,
            body=body_stream(content),
            content_length=len(content),
            **kwargs,
        )


@dataclass
class MockRequest:
    """
    Descriptor of a registered mock, handed to request matchers.

    The JSONPath matchers accept it for signature compatibility with
    mocking subsystems but do not inspect it.
    """
    method: str = "GET"
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
