"""
JSONPath matchers for request mocking.

Matchers evaluate the same checks as the assertion factories, but
against the body of an incoming request instead of a response. A
mocking subsystem calls them as matcher(request, mock_request) and
treats a returned error as "this mock does not match".

Usage:
    from jsonpath_assert import mocks

    matcher = mocks.equal("$.name", "jan")
    if matcher(request, mock_request) is None:
        ...  # serve the mocked response
"""

from __future__ import annotations

from typing import Any

from .assertions import factories
from .assertions.errors import JsonPathAssertionError
from .transport.duplication import copy_request
from .transport.models import HTTPRequest, MockRequest


class Matcher:
    """Matches a request's JSON body with a body assertion."""

    def __init__(self, assertion: factories.BodyAssertion):
        self.assertion = assertion

    def __call__(
        self,
        request: HTTPRequest | None,
        mock_request: MockRequest | None = None,
    ) -> JsonPathAssertionError | None:
        # read a copy so the caller can still read the original body
        try:
            request_copy = copy_request(request)
        except JsonPathAssertionError as e:
            return e
        body = request_copy.body if request_copy is not None else None
        return self.assertion.check_body(body)

    def __repr__(self) -> str:
        return f"Matcher({self.assertion!r})"


def contains(expression: str, expected: Any) -> Matcher:
    return Matcher(factories.contains(expression, expected))


def equal(expression: str, expected: Any) -> Matcher:
    return Matcher(factories.equal(expression, expected))


def not_equal(expression: str, expected: Any) -> Matcher:
    return Matcher(factories.not_equal(expression, expected))


def length(expression: str, expected_length: int) -> Matcher:
    return Matcher(factories.length(expression, expected_length))


def greater_than(expression: str, minimum_length: int) -> Matcher:
    return Matcher(factories.greater_than(expression, minimum_length))


def less_than(expression: str, maximum_length: int) -> Matcher:
    return Matcher(factories.less_than(expression, maximum_length))


def present(expression: str) -> Matcher:
    return Matcher(factories.present(expression))


def not_present(expression: str) -> Matcher:
    return Matcher(factories.not_present(expression))


def matches(expression: str, pattern: str) -> Matcher:
    return Matcher(factories.matches(expression, pattern))
