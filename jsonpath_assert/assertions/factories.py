"""
Assertion factories.

One factory per comparator. Each captures an expression and its
parameters and returns a BodyAssertion, which reads the response body,
extracts the value and compares it when called.

Usage:
    assertion = equal("$.a", 12345)
    error = assertion(response, request)
    if error is not None:
        print(error)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, BinaryIO, Callable

from .base import Assertion
from .comparators import (
    check_contains,
    check_equal,
    check_greater_than,
    check_length,
    check_less_than,
    check_matches,
    check_not_equal,
    check_not_present,
    check_present,
)
from .errors import EvaluationError, InvalidPatternError, JsonPathAssertionError, ParseError, ReadError
from .extractor import extract

if TYPE_CHECKING:
    from ..transport.models import HTTPRequest, HTTPResponse

logger = logging.getLogger(__name__)

BodyCheck = Callable[[BinaryIO | None], None]


class BodyAssertion(Assertion):
    """
    An assertion on the JSON body of a response.

    Attributes:
        name: The comparator name, e.g. "equal"
        expression: The JSONPath expression it evaluates
        expected: The expected value or bound, if any
    """

    def __init__(self, name: str, expression: str, check: BodyCheck, expected: Any = None):
        self.name = name
        self.expression = expression
        self.expected = expected
        self._check = check

    def check_body(self, body: BinaryIO | None) -> JsonPathAssertionError | None:
        """Run the check against a body stream."""
        try:
            self._check(body)
        except JsonPathAssertionError as e:
            logger.debug(f"{self.name} failed for '{self.expression}': {e}")
            return e
        return None

    def evaluate(
        self,
        response: HTTPResponse | None,
        request: HTTPRequest | None = None,
    ) -> JsonPathAssertionError | None:
        body = response.body if response is not None else None
        return self.check_body(body)

    def __repr__(self) -> str:
        if self.expected is None:
            return f"<{self.name} {self.expression!r}>"
        return f"<{self.name} {self.expression!r} {self.expected!r}>"


def _extract_or_none(body: BinaryIO | None, expression: str) -> Any:
    """Extract, treating any extraction failure as an absent value."""
    try:
        return extract(body, expression)
    except (ReadError, ParseError, EvaluationError) as e:
        logger.debug(f"Treating '{expression}' as absent: {e}")
        return None


def contains(expression: str, expected: Any) -> BodyAssertion:
    """Assert that the extracted string, array or object contains expected."""
    def check(body):
        check_contains(expression, extract(body, expression), expected)
    return BodyAssertion("contains", expression, check, expected)


def equal(expression: str, expected: Any) -> BodyAssertion:
    """Assert that the extracted value deep-equals expected."""
    def check(body):
        check_equal(expression, extract(body, expression), expected)
    return BodyAssertion("equal", expression, check, expected)


def not_equal(expression: str, expected: Any) -> BodyAssertion:
    """Assert that the extracted value does not equal expected."""
    def check(body):
        check_not_equal(expression, extract(body, expression), expected)
    return BodyAssertion("not_equal", expression, check, expected)


def length(expression: str, expected_length: int) -> BodyAssertion:
    """Assert that the extracted value has exactly the given length."""
    def check(body):
        check_length(expression, extract(body, expression), expected_length)
    return BodyAssertion("length", expression, check, expected_length)


def greater_than(expression: str, minimum_length: int) -> BodyAssertion:
    """
    Assert a lower bound on the extracted value's length.

    Fails only when the length is strictly less than minimum_length.
    """
    def check(body):
        check_greater_than(expression, extract(body, expression), minimum_length)
    return BodyAssertion("greater_than", expression, check, minimum_length)


def less_than(expression: str, maximum_length: int) -> BodyAssertion:
    """
    Assert an upper bound on the extracted value's length.

    Fails only when the length is strictly greater than maximum_length.
    """
    def check(body):
        check_less_than(expression, extract(body, expression), maximum_length)
    return BodyAssertion("less_than", expression, check, maximum_length)


def present(expression: str) -> BodyAssertion:
    """Assert that the expression selects a non-empty value."""
    def check(body):
        check_present(expression, _extract_or_none(body, expression))
    return BodyAssertion("present", expression, check)


def not_present(expression: str) -> BodyAssertion:
    """Assert that the expression selects nothing, or an empty value."""
    def check(body):
        check_not_present(expression, _extract_or_none(body, expression))
    return BodyAssertion("not_present", expression, check)


def matches(expression: str, pattern: str) -> BodyAssertion:
    """
    Assert that the extracted scalar matches a regular expression.

    The pattern is compiled before the body is touched.
    """
    def check(body):
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(
                f"invalid pattern: '{pattern}'",
                expression=expression,
                expected=pattern,
            ) from e
        check_matches(expression, _extract_or_none(body, expression), compiled)
    return BodyAssertion("matches", expression, check, pattern)


# Operation names as used in expectation files
OPERATIONS: dict[str, Callable[..., BodyAssertion]] = {
    "contains": contains,
    "equal": equal,
    "not_equal": not_equal,
    "len": length,
    "greater_than": greater_than,
    "less_than": less_than,
    "present": present,
    "not_present": not_present,
    "matches": matches,
}

# Operations that take no expected value
UNARY_OPERATIONS = frozenset({"present", "not_present"})
