"""
Base assertion interface.

This module defines the abstract base class that every assertion
follows: a callable taking a (response, request) pair and returning
None on success or the failure as an error value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .errors import JsonPathAssertionError

if TYPE_CHECKING:
    from ..transport.models import HTTPRequest, HTTPResponse


class Assertion(ABC):
    """
    Abstract base class for assertions over an HTTP exchange.

    Assertions are immutable once constructed. Evaluating one consumes
    the body stream it reads, so chains hand each assertion its own copy.
    """

    @abstractmethod
    def evaluate(
        self,
        response: HTTPResponse | None,
        request: HTTPRequest | None = None,
    ) -> JsonPathAssertionError | None:
        """
        Evaluate the assertion against an exchange.

        Args:
            response: The response to inspect
            request: The request that produced it

        Returns:
            None on success, otherwise the failure
        """
        pass

    def __call__(
        self,
        response: HTTPResponse | None,
        request: HTTPRequest | None = None,
    ) -> JsonPathAssertionError | None:
        return self.evaluate(response, request)

    def verify(
        self,
        response: HTTPResponse | None,
        request: HTTPRequest | None = None,
    ) -> None:
        """
        Evaluate and raise the failure, if any.

        Convenient inside pytest tests, where the raised AssertionError
        subclass is reported as a test failure.
        """
        error = self.evaluate(response, request)
        if error is not None:
            raise error
