"""
Assertion chains.

A chain collects assertions that share an expression prefix and
combines them into a single assertion. The combined assertion runs
each one in order against its own copy of the exchange and stops at
the first failure.

Usage:
    assertion = (
        root("$.a.b.c")
        .equal("d", 1)
        .contains("f", 5)
        .end()
    )
    error = assertion(response, request)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..transport.duplication import copy_request, copy_response
from . import factories
from .base import Assertion
from .errors import ChainClosedError, JsonPathAssertionError

if TYPE_CHECKING:
    from ..transport.models import HTTPRequest, HTTPResponse

logger = logging.getLogger(__name__)


class ChainAssertion(Assertion):
    """The combined assertion produced by AssertionChain.end()."""

    def __init__(self, assertions: tuple[Assertion, ...]):
        self.assertions = assertions

    def evaluate(
        self,
        response: HTTPResponse | None,
        request: HTTPRequest | None = None,
    ) -> JsonPathAssertionError | None:
        for index, assertion in enumerate(self.assertions):
            try:
                response_copy = copy_response(response)
                request_copy = copy_request(request)
            except JsonPathAssertionError as e:
                return e

            error = assertion(response_copy, request_copy)
            if error is not None:
                logger.debug(f"Chain stopped at assertion {index + 1}/{len(self.assertions)}: {error}")
                return error
        return None

    def __len__(self) -> int:
        return len(self.assertions)

    def __repr__(self) -> str:
        return f"ChainAssertion({list(self.assertions)!r})"


class AssertionChain:
    """
    Builder for an ordered, prefix-sharing list of assertions.

    Builder methods return the chain itself. Calling end() closes the
    chain; adding to it afterwards raises ChainClosedError.
    """

    def __init__(self, root_expression: str = ""):
        self.root_expression = root_expression
        self._assertions: list[Assertion] = []
        self._closed = False

    def _add(self, assertion: Assertion) -> AssertionChain:
        if self._closed:
            raise ChainClosedError(
                "cannot add assertions to a chain after end()",
                expression=getattr(assertion, "expression", None),
            )
        self._assertions.append(assertion)
        return self

    def _expression(self, expression: str) -> str:
        return self.root_expression + expression

    def equal(self, expression: str, expected: Any) -> AssertionChain:
        return self._add(factories.equal(self._expression(expression), expected))

    def not_equal(self, expression: str, expected: Any) -> AssertionChain:
        return self._add(factories.not_equal(self._expression(expression), expected))

    def contains(self, expression: str, expected: Any) -> AssertionChain:
        return self._add(factories.contains(self._expression(expression), expected))

    def length(self, expression: str, expected_length: int) -> AssertionChain:
        return self._add(factories.length(self._expression(expression), expected_length))

    def greater_than(self, expression: str, minimum_length: int) -> AssertionChain:
        return self._add(factories.greater_than(self._expression(expression), minimum_length))

    def less_than(self, expression: str, maximum_length: int) -> AssertionChain:
        return self._add(factories.less_than(self._expression(expression), maximum_length))

    def present(self, expression: str) -> AssertionChain:
        return self._add(factories.present(self._expression(expression)))

    def not_present(self, expression: str) -> AssertionChain:
        return self._add(factories.not_present(self._expression(expression)))

    def matches(self, expression: str, pattern: str) -> AssertionChain:
        return self._add(factories.matches(self._expression(expression), pattern))

    def end(self) -> ChainAssertion:
        """Close the chain and combine its assertions into one."""
        self._closed = True
        return ChainAssertion(tuple(self._assertions))

    def __len__(self) -> int:
        return len(self._assertions)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "building"
        return f"AssertionChain(root={self.root_expression!r}, assertions={len(self)}, {state})"


def chain() -> AssertionChain:
    """Create an assertion chain without an expression prefix."""
    return AssertionChain()


def root(expression: str) -> AssertionChain:
    """Create an assertion chain whose expressions are children of expression."""
    return AssertionChain(expression + ".")
