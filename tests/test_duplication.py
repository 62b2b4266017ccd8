"""Tests for duplicating single-read response and request bodies."""

import pytest
from multidict import CIMultiDict
from yarl import URL

from jsonpath_assert import ReadError
from jsonpath_assert.transport import HTTPRequest, HTTPResponse, copy_request, copy_response

from tests.helpers import FailingStream


class TestCopyResponse:

    def test_copy_and_original_are_both_readable(self):
        response = HTTPResponse.from_json({"a": 1}, status_code=201)

        copy = copy_response(response)

        assert copy.body.read() == b'{"a": 1}'
        assert response.body.read() == b'{"a": 1}'
        assert copy.status_code == 201
        assert copy.headers["content-type"] == "application/json"

    def test_headers_are_independent(self):
        response = HTTPResponse(headers=CIMultiDict([("X-Tag", "a"), ("X-Tag", "b")]))

        copy = copy_response(response)
        copy.headers.add("X-Other", "c")

        assert copy.headers.getall("X-Tag") == ["a", "b"]
        assert "X-Other" not in response.headers

    def test_none(self):
        assert copy_response(None) is None

    def test_missing_body(self):
        copy = copy_response(HTTPResponse())
        assert copy.body is None

    def test_read_failure(self):
        with pytest.raises(ReadError):
            copy_response(HTTPResponse(body=FailingStream()))


class TestCopyRequest:

    def test_copy_and_original_are_both_readable(self, json_request):
        copy = copy_request(json_request)

        assert copy.body.read() == json_request.body.read()
        assert copy.method == "POST"
        assert copy.url == URL("http://localhost:8080/hello")
        assert copy.host == "localhost"

    def test_url_string_is_converted(self):
        request = HTTPRequest(url="http://example.com/a?b=c")
        assert isinstance(request.url, URL)
        assert copy_request(request).url.query["b"] == "c"

    def test_none(self):
        assert copy_request(None) is None
