"""
Duplication of single-read HTTP bodies.

Each helper reads the original body once into a buffer, rewinds the
original by replacing its stream with a fresh view of that buffer and
returns a copy holding another independent view.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from multidict import CIMultiDict

from ..assertions.extractor import read_body
from .models import HTTPRequest, HTTPResponse


def _buffer(body: BinaryIO | None) -> bytes | None:
    if body is None:
        return None
    return read_body(body)


def copy_response(response: HTTPResponse | None) -> HTTPResponse | None:
    """
    Copy a response, leaving the original with a re-readable body.

    Raises:
        ReadError: If the original body fails while being read
    """
    if response is None:
        return None

    content = _buffer(response.body)
    if content is not None:
        response.body = io.BytesIO(content)

    return HTTPResponse(
        status_code=response.status_code,
        reason=response.reason,
        headers=CIMultiDict(response.headers),
        body=io.BytesIO(content) if content is not None else None,
        http_version=response.http_version,
        content_length=response.content_length,
    )


def copy_request(request: HTTPRequest | None) -> HTTPRequest | None:
    """
    Copy a request, leaving the original with a re-readable body.

    The URL is immutable and shared between original and copy.

    Raises:
        ReadError: If the original body fails while being read
    """
    if request is None:
        return None

    content = _buffer(request.body)
    if content is not None:
        request.body = io.BytesIO(content)

    return HTTPRequest(
        method=request.method,
        url=request.url,
        headers=CIMultiDict(request.headers),
        body=io.BytesIO(content) if content is not None else None,
        host=request.host,
        http_version=request.http_version,
        content_length=request.content_length,
        remote_addr=request.remote_addr,
    )
