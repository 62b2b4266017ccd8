"""
Assertion result models.

This module defines the record of a single evaluated assertion, used
when checks are reported rather than raised, e.g. by the CLI.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import EvaluationError, JsonPathAssertionError, ParseError, ReadError

# Failures that mean the check could not be evaluated at all
_ERROR_TYPES = (ReadError, ParseError, EvaluationError)


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # e.g., invalid path, malformed body


@dataclass
class AssertionResult:
    """
    Result of a single assertion check.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        op: The operation that was checked, e.g. "equal"
        path: The JSONPath that was evaluated
        message: Human-readable description of the result
        expected: What was expected
        actual: What was actually found
        error_type: Class name of the failure, if any
    """
    status: AssertionStatus
    op: str
    path: str | None = None
    message: str = ""
    expected: Any = None
    actual: Any = None
    error_type: str | None = None

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @classmethod
    def from_outcome(
        cls,
        op: str,
        path: str | None,
        error: JsonPathAssertionError | None,
        expected: Any = None,
    ) -> AssertionResult:
        """Build a result from an assertion's returned error value."""
        if error is None:
            return cls(
                status=AssertionStatus.PASSED,
                op=op,
                path=path,
                message="passed",
                expected=expected,
            )

        status = AssertionStatus.ERROR if isinstance(error, _ERROR_TYPES) else AssertionStatus.FAILED
        return cls(
            status=status,
            op=op,
            path=error.expression or path,
            message=error.message,
            expected=error.expected if error.expected is not None else expected,
            actual=error.actual,
            error_type=type(error).__name__,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "op": self.op,
            "path": self.path,
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
            "error_type": self.error_type,
        }

    def __str__(self) -> str:
        if self.status == AssertionStatus.PASSED:
            return f"PASS: {self.op} {self.path}"

        lines = [f"{self.status.value.upper()}: {self.op} {self.path}: {self.message}"]
        if self.expected is not None:
            lines.append(f"   Expected: {format_value(self.expected)}")
        if self.actual is not None:
            lines.append(f"   Actual:   {format_value(self.actual)}")
        return "\n".join(lines)


def format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
