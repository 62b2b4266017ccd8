"""
Value extraction for JSONPath assertions.

Reads a body stream, parses it as JSON and evaluates a JSONPath
expression against the document using jsonpath-ng's extended grammar
(which adds filters such as $.items[?(@.key == "c")]).
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, BinaryIO

from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.ext import parse as parse_jsonpath
from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root, This

from .errors import EvaluationError, ParseError, ReadError

logger = logging.getLogger(__name__)


def read_body(body: BinaryIO | None) -> bytes:
    """Read a body stream to completion. A missing body reads as empty."""
    if body is None:
        return b""
    try:
        data = body.read()
    except (OSError, ValueError) as e:
        raise ReadError(f"failed to read body: {e}") from e
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def parse_document(data: bytes) -> Any:
    """Parse raw bytes as a JSON document."""
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"invalid JSON body: {e}") from e


@lru_cache(maxsize=256)
def compile_expression(expression: str) -> JSONPath:
    """
    Compile a JSONPath expression.

    Compiled trees are immutable, so they are memoised per expression.

    Raises:
        EvaluationError: If the expression does not parse
    """
    try:
        return parse_jsonpath(expression)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise EvaluationError(
            f"evaluating '{expression}' resulted in error: '{e}'",
            expression=expression,
        ) from e
    except Exception as e:
        raise EvaluationError(
            f"evaluating '{expression}' resulted in error: '{type(e).__name__}: {e}'",
            expression=expression,
        ) from e


def is_definite(node: JSONPath) -> bool:
    """
    Return True if the expression can select at most one value.

    Field names, single indices and chains of them are definite.
    Wildcards, slices, filters, unions and recursive descent are not.
    """
    if isinstance(node, (Root, This)):
        return True
    if isinstance(node, Fields):
        return len(node.fields) == 1 and node.fields[0] != "*"
    if isinstance(node, Index):
        indices = getattr(node, "indices", None)
        return indices is None or len(indices) == 1
    if isinstance(node, Child):
        return is_definite(node.left) and is_definite(node.right)
    # Slice, Descendants, Union, Where and ext Filter all fan out
    return type(node).__name__ not in {
        "Slice",
        "Descendants",
        "Union",
        "Intersect",
        "Where",
        "WhereNot",
        "Filter",
    }


def evaluate(document: Any, expression: str) -> Any:
    """
    Evaluate an expression against a parsed document.

    Returns:
        The single matched value for a definite expression, otherwise
        the list of matched values (possibly empty)

    Raises:
        EvaluationError: If the expression is invalid, fails to evaluate,
            or is definite and matches nothing
    """
    compiled = compile_expression(expression)

    try:
        matches = compiled.find(document)
    except Exception as e:
        raise EvaluationError(
            f"evaluating '{expression}' resulted in error: '{type(e).__name__}: {e}'",
            expression=expression,
        ) from e

    if not is_definite(compiled):
        return [m.value for m in matches]

    if not matches:
        raise EvaluationError(
            f"evaluating '{expression}' resulted in error: '{_describe_miss(compiled)}'",
            expression=expression,
        )
    if len(matches) > 1:
        return [m.value for m in matches]
    return matches[0].value


def extract(body: BinaryIO | None, expression: str) -> Any:
    """
    Read, parse and evaluate in one step.

    Every call re-reads and re-parses its own stream; nothing is cached
    between calls except the compiled expression.
    """
    data = read_body(body)
    document = parse_document(data)
    value = evaluate(document, expression)
    logger.debug(f"Extracted {type(value).__name__} for '{expression}'")
    return value


def _describe_miss(node: JSONPath) -> str:
    """Name the last path segment that failed to resolve."""
    leaf = node.right if isinstance(node, Child) else node
    if isinstance(leaf, Fields):
        return f"unknown key {leaf.fields[0]}"
    if isinstance(leaf, Index):
        indices = getattr(leaf, "indices", None) or (leaf.index,)
        return f"index {indices[0]} out of range"
    return "no value found"
