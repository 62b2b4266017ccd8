"""
HTTP exchange layer.

This package provides the response/request objects assertions run
against, helpers that duplicate their single-read bodies, and an
aiohttp-backed client that captures live exchanges.

Usage:
    from jsonpath_assert.transport import HTTPRequest, fetch

    request = HTTPRequest(method="GET", url="http://localhost:8000/hello")
    response = await fetch(request)
"""

# Models
from .models import HTTPRequest, HTTPResponse, MockRequest, body_stream

# Duplication
from .duplication import copy_request, copy_response

# Live capture
from .http import HTTPClient, TransportError, capture_response, fetch

__all__ = [
    # Models
    "HTTPRequest",
    "HTTPResponse",
    "MockRequest",
    "body_stream",
    # Duplication
    "copy_request",
    "copy_response",
    # Live capture
    "HTTPClient",
    "TransportError",
    "capture_response",
    "fetch",
]
