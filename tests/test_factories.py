"""Tests for the assertion factories against response bodies."""

import pytest

from jsonpath_assert import (
    AbsentValueError,
    ContainsTypeError,
    EvaluationError,
    InvalidPatternError,
    LengthMismatchError,
    NoMatchError,
    NotContainedError,
    NotEqualError,
    NullValueError,
    ParseError,
    PatternMismatchError,
    PresentValueError,
    ReadError,
    UnexpectedEqualError,
    UnsupportedTypeError,
    contains,
    equal,
    greater_than,
    length,
    less_than,
    matches,
    not_equal,
    not_present,
    present,
)
from jsonpath_assert.transport.models import HTTPResponse

from tests.helpers import FailingStream, closed_stream, make_response


class TestContains:

    def test_filter_result(self, hello_body):
        assert contains('$.b[?(@.key == "c")].value', "result")(make_response(hello_body), None) is None

    def test_substring(self):
        assert contains("$.s", "World")(make_response('{"s": "Hello World"}'), None) is None

    def test_object_key(self):
        assert contains("$.o", "k")(make_response('{"o": {"k": "v"}}'), None) is None

    def test_object_value_is_not_a_key(self):
        error = contains("$.o", "v")(make_response('{"o": {"k": "v"}}'), None)
        assert isinstance(error, NotContainedError)

    def test_not_found(self):
        error = contains("$.a", 4)(make_response('{"a": [1, 2, 3]}'), None)
        assert isinstance(error, NotContainedError)
        assert error.expression == "$.a"

    def test_not_applicable(self):
        error = contains("$.a", "1")(make_response('{"a": 1433}'), None)
        assert isinstance(error, ContainsTypeError)


class TestEqual:

    def test_numeric(self, hello_body):
        assert equal("$.a", 12345)(make_response(hello_body), None) is None

    def test_numeric_float(self, hello_body):
        assert equal("$.a", 12345.0)(make_response(hello_body), None) is None

    def test_string(self):
        assert equal("$.a", "12345")(make_response('{"a": "12345"}'), None) is None

    def test_string_is_not_number(self, hello_body):
        error = equal("$.a", "12345")(make_response(hello_body), None)
        assert isinstance(error, NotEqualError)
        assert error.expected == "12345"
        assert error.actual == 12345

    def test_map(self):
        response = make_response('{"a": "hello", "b": 12345}')
        assert equal("$", {"a": "hello", "b": 12345})(response, None) is None

    def test_missing_path_propagates(self):
        error = equal("$.missing", 1)(make_response('{"a": 1}'), None)
        assert isinstance(error, EvaluationError)

    def test_malformed_body(self):
        error = equal("$.a", 1)(make_response('{"a": '), None)
        assert isinstance(error, ParseError)

    def test_read_failure(self):
        error = equal("$.a", 1)(HTTPResponse(body=FailingStream()), None)
        assert isinstance(error, ReadError)

    def test_closed_stream(self):
        error = equal("$.a", 1)(HTTPResponse(body=closed_stream()), None)
        assert isinstance(error, ReadError)

    def test_verify_raises(self):
        with pytest.raises(NotEqualError):
            equal("$.a", 2).verify(make_response('{"a": 1}'))

    def test_verify_passes(self):
        equal("$.a", 1).verify(make_response('{"a": 1}'))


class TestNotEqual:

    def test_different(self):
        assert not_equal("$.a", 2)(make_response('{"a": 1}'), None) is None

    def test_equal_fails(self):
        error = not_equal("$.a", 1)(make_response('{"a": 1}'), None)
        assert isinstance(error, UnexpectedEqualError)
        assert str(error) == '"$.a" value is equal to "1"'


class TestLength:

    def test_len(self):
        response_body = '{"a": [1, 2, 3], "b": "c"}'
        assert length("$.a", 3)(make_response(response_body), None) is None
        assert length("$.b", 1)(make_response(response_body), None) is None

    def test_len_mismatch(self):
        error = length("$.a", 2)(make_response('{"a": [1, 2, 3]}'), None)
        assert isinstance(error, LengthMismatchError)
        assert error.actual == 3

    @pytest.mark.parametrize("factory", [length, greater_than, less_than])
    def test_null_value(self, factory):
        error = factory("$.a", 0)(make_response('{"a": null}'), None)
        assert isinstance(error, NullValueError)

    def test_greater_than(self):
        response_body = '{"a": [1, 2, 3]}'
        assert greater_than("$.a", 2)(make_response(response_body), None) is None
        assert greater_than("$.a", 3)(make_response(response_body), None) is None
        assert isinstance(greater_than("$.a", 4)(make_response(response_body), None), LengthMismatchError)

    def test_less_than(self):
        response_body = '{"a": [1, 2, 3]}'
        assert less_than("$.a", 4)(make_response(response_body), None) is None
        assert less_than("$.a", 3)(make_response(response_body), None) is None
        assert isinstance(less_than("$.a", 2)(make_response(response_body), None), LengthMismatchError)


class TestPresence:

    def test_present_and_not_present(self):
        response_body = '{"a": 22}'
        assert present("$.a")(make_response(response_body), None) is None
        assert not_present("$.password")(make_response(response_body), None) is None

    def test_present_fails_for_missing(self):
        error = present("$.password")(make_response('{"a": 22}'), None)
        assert isinstance(error, AbsentValueError)
        assert str(error) == "value not present for expression: '$.password'"

    def test_present_fails_for_empty(self):
        assert isinstance(present("$.a")(make_response('{"a": []}'), None), AbsentValueError)

    def test_not_present_fails_for_value(self):
        error = not_present("$.a")(make_response('{"a": 22}'), None)
        assert isinstance(error, PresentValueError)

    @pytest.mark.parametrize("response_body", ["", "<html>", "not json"])
    def test_unreadable_body_counts_as_absent(self, response_body):
        response = make_response(response_body)
        assert not_present("$.password")(response, None) is None
        assert isinstance(present("$.password")(make_response(response_body), None), AbsentValueError)
        assert isinstance(matches("$.id", r"^\d+$")(make_response(response_body), None), NoMatchError)

    def test_failing_stream_counts_as_absent(self):
        assert not_present("$.a")(HTTPResponse(body=FailingStream()), None) is None
        assert isinstance(present("$.a")(HTTPResponse(body=FailingStream()), None), AbsentValueError)
        assert isinstance(matches("$.a", ".+")(HTTPResponse(body=closed_stream()), None), NoMatchError)


BODY = (
    '{"anObject":{"aString":"tom<3Beer","aNumber":7.212,"aBool":true},'
    '"aString":"tom<3Beer","aNumber":7,"aNumberSlice":[7,8,9],"aStringSlice":["7","8","9"]}'
)


class TestMatches:

    @pytest.mark.parametrize("expression, pattern", [
        ("$.aString", r"^[mot]{3}<3[AB][re]{3}$"),
        ("$.aNumber", r"^\d$"),
        ("$.anObject.aNumber", r"^\d\.\d{3}$"),
        ("$.aNumberSlice[1]", r"^[80]$"),
        ("$.anObject.aBool", r"^true$"),
    ])
    def test_match(self, expression, pattern):
        assert matches(expression, pattern)(make_response(BODY), None) is None

    def test_fail_compile(self):
        """The pattern is compiled before the response is touched."""
        error = matches('$.b[?(@.key == "c")].value', "\\")(None, None)
        assert isinstance(error, InvalidPatternError)
        assert str(error) == "invalid pattern: '\\'"

    def test_fail_for_object(self):
        error = matches("$.anObject", ".+")(make_response('{"anObject":{"aString":"lol"}}'), None)
        assert isinstance(error, UnsupportedTypeError)
        assert str(error) == "unable to match using type: map"

    def test_fail_for_array(self):
        error = matches("$.aSlice", ".+")(make_response('{"aSlice":[1,2,3]}'), None)
        assert isinstance(error, UnsupportedTypeError)
        assert str(error) == "unable to match using type: slice"

    def test_fail_for_nil_value(self):
        error = matches("$.nothingHere", ".+")(make_response('{"aSlice":[1,2,3]}'), None)
        assert isinstance(error, NoMatchError)
        assert str(error) == "no match for pattern: '$.nothingHere'"

    def test_mismatch(self):
        error = matches("$.aString", r"^\d+$")(make_response(BODY), None)
        assert isinstance(error, PatternMismatchError)
