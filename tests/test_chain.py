"""Tests for assertion chains."""

from unittest.mock import Mock

import pytest

from jsonpath_assert import (
    ChainClosedError,
    HTTPResponse,
    NotEqualError,
    ParseError,
    ReadError,
    chain,
    root,
)
from jsonpath_assert.assertions.chain import ChainAssertion

from tests.helpers import closed_stream, make_response


class TestRoot:

    def test_success(self, nested_body):
        assertion = root("$.a.b.c").equal("d", 1).contains("f", 5).end()
        assert assertion(make_response(nested_body), None) is None

    def test_short_circuits_on_first_failure(self):
        """The failing 'd' check stops the chain before 'f' is evaluated."""
        response = make_response('{"a":{"b":{"c":{"d":2,"f":[3,4,5]}}}}')
        never_called = Mock(return_value=None)
        assertion = root("$.a.b.c").equal("d", 1).contains("f", 5).end()
        assertion = ChainAssertion(assertion.assertions + (never_called,))

        error = assertion(response, None)

        assert isinstance(error, NotEqualError)
        assert error.expression == "$.a.b.c.d"
        never_called.assert_not_called()

    def test_prefix(self):
        builder = root("$.a")
        builder.present("b")
        assert builder.root_expression == "$.a."
        assert builder.end().assertions[0].expression == "$.a.b"

    def test_all_builder_methods(self):
        response = make_response('{"data": {"name": "jan", "tags": ["x", "y"], "id": 7}}')
        assertion = (
            root("$.data")
            .equal("name", "jan")
            .not_equal("name", "tom")
            .contains("tags", "x")
            .length("tags", 2)
            .greater_than("tags", 1)
            .less_than("tags", 3)
            .present("id")
            .not_present("password")
            .matches("id", r"^\d+$")
            .end()
        )
        assert len(assertion) == 9
        assert assertion(response, None) is None


class TestChain:

    def test_no_prefix(self):
        assertion = chain().equal("$.a", 1).present("$.b").end()
        assert assertion(make_response('{"a": 1, "b": true}'), None) is None

    def test_empty_chain_passes(self):
        assert chain().end()(make_response("{}"), None) is None

    def test_runs_twice_against_same_response(self, nested_body):
        """Duplication leaves the original body readable for the next run."""
        response = make_response(nested_body)
        assertion = root("$.a.b.c").equal("d", 1).contains("f", 5).end()

        assert assertion(response, None) is None
        assert assertion(response, None) is None
        assert response.body.read() == nested_body.encode()

    def test_request_body_is_preserved(self, json_request):
        assertion = chain().equal("$.a", 1).end()
        assertion(make_response('{"a": 1}'), json_request)
        assert b'"name": "jan"' in json_request.body.read()

    def test_propagates_error_verbatim(self):
        error = chain().equal("$.a", 1).end()(make_response("nope"), None)
        assert isinstance(error, ParseError)

    def test_closed_stream_is_a_read_error(self):
        error = root("$").equal("a", 1).end()(HTTPResponse(body=closed_stream()), None)
        assert isinstance(error, ReadError)

    def test_each_assertion_gets_fresh_copy(self):
        response = make_response('{"a": 1}')
        seen = []

        def spy(res, req):
            seen.append(res.body.read())
            return None

        ChainAssertion((spy, spy))(response, None)

        assert seen == [b'{"a": 1}', b'{"a": 1}']


class TestLifecycle:

    def test_cannot_add_after_end(self):
        builder = chain().equal("$.a", 1)
        builder.end()
        with pytest.raises(ChainClosedError):
            builder.equal("$.b", 2)

    def test_end_result_is_immutable(self):
        builder = chain().equal("$.a", 1)
        first = builder.end()
        assert isinstance(first.assertions, tuple)
        assert len(first) == 1

    def test_verify(self):
        with pytest.raises(NotEqualError):
            chain().equal("$.a", 2).end().verify(make_response('{"a": 1}'))
