"""
Error taxonomy for JSONPath assertions.

Every failure an assertion can report is a subclass of
JsonPathAssertionError. Assertions return these as values; only
Assertion.verify() raises them.
"""

from __future__ import annotations

from typing import Any


class JsonPathAssertionError(AssertionError):
    """
    Base class for all assertion failures.

    Attributes:
        expression: The JSONPath expression that was evaluated, if any
        expected: What the assertion expected, if applicable
        actual: The value that was extracted, if applicable
    """

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.expression = expression
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


# ─────────────────────────────────────────────────────────────────────────────
# Extraction
# ─────────────────────────────────────────────────────────────────────────────

class ReadError(JsonPathAssertionError):
    """The body stream failed while being read."""


class ParseError(JsonPathAssertionError):
    """The body is not valid JSON."""


class EvaluationError(JsonPathAssertionError):
    """The expression is invalid or does not resolve against the document."""


# ─────────────────────────────────────────────────────────────────────────────
# Comparison
# ─────────────────────────────────────────────────────────────────────────────

class NotEqualError(JsonPathAssertionError):
    pass


class UnexpectedEqualError(JsonPathAssertionError):
    pass


class ContainsTypeError(JsonPathAssertionError):
    """Containment cannot be applied to the extracted value's type."""


class NotContainedError(JsonPathAssertionError):
    pass


class LengthMismatchError(JsonPathAssertionError):
    pass


class NullValueError(JsonPathAssertionError):
    """A length check was applied to a null value."""


class UnsupportedTypeError(JsonPathAssertionError):
    """The extracted value's kind cannot be used by the check."""

    def __init__(self, message: str, kind: str, expression: str | None = None, actual: Any = None):
        super().__init__(message, expression=expression, actual=actual)
        self.kind = kind


class NoMatchError(JsonPathAssertionError):
    """Pattern matching was attempted against an absent value."""


class PatternMismatchError(JsonPathAssertionError):
    pass


class InvalidPatternError(JsonPathAssertionError):
    """The regular expression did not compile."""


class AbsentValueError(JsonPathAssertionError):
    pass


class PresentValueError(JsonPathAssertionError):
    pass


class ChainClosedError(JsonPathAssertionError):
    """An assertion was added to a chain after end() was called."""
