"""Shared builders for the test suite."""

import io

from jsonpath_assert import HTTPResponse


def make_response(body: str | bytes | None) -> HTTPResponse:
    """Build a response around a raw JSON body."""
    if body is None:
        return HTTPResponse()
    return HTTPResponse.from_bytes(body)


def closed_stream() -> io.BytesIO:
    """A body stream that has already been closed."""
    stream = io.BytesIO(b'{"a": 1}')
    stream.close()
    return stream


class FailingStream(io.RawIOBase):
    """A body stream whose read always fails."""

    def read(self, size=-1):
        raise OSError("connection reset")
