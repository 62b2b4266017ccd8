"""
Typed data structures for expectation files.

This module contains the enums and dataclasses that represent a parsed
expectation file, and turns them into assertions.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..assertions import BodyAssertion, ChainAssertion, chain, root
from ..assertions.factories import OPERATIONS, UNARY_OPERATIONS
from ..transport.models import HTTPRequest, body_stream


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class CheckOp(str, Enum):
    """Supported check operators."""
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    CONTAINS = "contains"
    LEN = "len"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    PRESENT = "present"
    NOT_PRESENT = "not_present"
    MATCHES = "matches"

    @property
    def takes_value(self) -> bool:
        return self.value not in UNARY_OPERATIONS


# ─────────────────────────────────────────────────────────────────────────────
# Request
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class RequestConfig:
    """The request to send when no body is supplied directly."""
    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None  # Sent as JSON when not None
    timeout_ms: int = 30000

    def to_http_request(self) -> HTTPRequest:
        headers = dict(self.headers)
        content = None
        if self.body is not None:
            content = json.dumps(self.body).encode("utf-8")
            headers.setdefault("Content-Type", "application/json")
        return HTTPRequest(
            method=self.method,
            url=self.url,
            headers=headers,
            body=body_stream(content),
            content_length=len(content) if content is not None else None,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Checks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Check:
    """A single check: an operator, a path and an optional value."""
    op: CheckOp
    path: str
    value: Any = None

    def to_assertion(self, root_expression: str | None = None) -> BodyAssertion:
        """Build the assertion for this check, under an optional root."""
        expression = f"{root_expression}.{self.path}" if root_expression else self.path
        factory = OPERATIONS[self.op.value]
        if self.op.takes_value:
            return factory(expression, self.value)
        return factory(expression)


# ─────────────────────────────────────────────────────────────────────────────
# Expectations
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Expectations:
    """Fully parsed and validated expectation file."""
    version: int
    name: str
    checks: list[Check] = field(default_factory=list)
    env: dict[str, Any] = field(default_factory=dict)
    request: RequestConfig | None = None
    root: str | None = None

    def assertions(self) -> list[BodyAssertion]:
        """One assertion per check, in file order."""
        return [check.to_assertion(self.root) for check in self.checks]

    def to_chain(self) -> ChainAssertion:
        """All checks combined into a single short-circuiting assertion."""
        builder = root(self.root) if self.root else chain()
        for check in self.checks:
            method = getattr(builder, "length" if check.op == CheckOp.LEN else check.op.value)
            if check.op.takes_value:
                method(check.path, check.value)
            else:
                method(check.path)
        return builder.end()
