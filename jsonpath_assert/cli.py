#!/usr/bin/env python3
"""
jsonpath-assert CLI - JSONPath checks for JSON bodies

Usage:
    jsonpath-assert check <expectations.yaml> [--body FILE|-] [OPTIONS]
    jsonpath-assert validate <expectations.yaml>
    jsonpath-assert --version
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .assertions import AssertionResult, AssertionStatus, JsonPathAssertionError
from .assertions.models import format_value
from .schema_parsing import Expectations, load_expectations
from .transport import HTTPRequest, HTTPResponse, TransportError, copy_request, copy_response, fetch

app = typer.Typer(
    name="jsonpath-assert",
    help="JSONPath assertions for JSON response bodies",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    AssertionStatus.PASSED: "green",
    AssertionStatus.FAILED: "red",
    AssertionStatus.ERROR: "yellow",
}


def version_callback(value: bool):
    if value:
        console.print(f"jsonpath-assert v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    Check JSON bodies against declarative JSONPath expectations.
    """
    pass


def configure_logging(debug: bool) -> None:
    """Route library logs through rich when debugging."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def run_checks(
    expectations: Expectations,
    response: HTTPResponse,
    request: HTTPRequest | None = None,
    fail_fast: bool = False,
) -> list[AssertionResult]:
    """
    Evaluate every check and collect the results.

    With fail_fast the checks run as one chain and produce a single
    result: the first failure, or a pass for the whole chain.
    """
    if fail_fast:
        assertion = expectations.to_chain()
        error = assertion(response, request)
        op = f"chain ({len(assertion)} checks)"
        return [AssertionResult.from_outcome(op, expectations.root or "$", error)]

    results = []
    for check, assertion in zip(expectations.checks, expectations.assertions()):
        try:
            error = assertion(copy_response(response), copy_request(request))
        except JsonPathAssertionError as e:
            error = e
        results.append(
            AssertionResult.from_outcome(check.op.value, assertion.expression, error, check.value)
        )
    return results


def read_body(body: str) -> bytes:
    """Read body content from a file path, or stdin for '-'."""
    if body == "-":
        return typer.get_binary_stream("stdin").read()
    return Path(body).read_bytes()


def print_results(results: list[AssertionResult]) -> None:
    table = Table(title="Checks")
    table.add_column("#", justify="right")
    table.add_column("Op", style="cyan")
    table.add_column("Path", style="magenta")
    table.add_column("Expected")
    table.add_column("Status")
    table.add_column("Message")

    for i, result in enumerate(results, start=1):
        style = STATUS_STYLES[result.status]
        table.add_row(
            str(i),
            result.op,
            result.path or "",
            format_value(result.expected, max_length=40) if result.expected is not None else "",
            f"[{style}]{result.status.value}[/{style}]",
            "" if result.passed else result.message,
        )

    console.print(table)


@app.command()
def check(
    expectations_file: Path = typer.Argument(
        ...,
        help="Path to the expectations YAML file",
        exists=True,
        readable=True,
    ),
    body: Optional[str] = typer.Option(
        None, "--body", "-b",
        help="JSON body file to check, or '-' for stdin (default: send the configured request)"
    ),
    fail_fast: bool = typer.Option(
        False, "--fail-fast", "-x",
        help="Stop at the first failing check"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Show debug logs"
    ),
):
    """
    Check a JSON body against an expectations file.

    The body comes from --body, or from sending the request configured
    in the file.
    """
    configure_logging(debug)

    expectations, validation = load_expectations(expectations_file)
    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    request = None
    if body is not None:
        try:
            response = HTTPResponse.from_bytes(read_body(body))
        except OSError as e:
            console.print(f"[red]❌ Unable to read body:[/red] {e}")
            raise typer.Exit(code=1)
    elif expectations.request is not None:
        request = expectations.request.to_http_request()
        try:
            response = asyncio.run(fetch(request, timeout_ms=expectations.request.timeout_ms))
        except TransportError as e:
            console.print(f"[red]❌ Request failed:[/red] {e}")
            raise typer.Exit(code=1)
    else:
        console.print("[red]❌ No body to check:[/red] pass --body or configure a request")
        raise typer.Exit(code=1)

    results = run_checks(expectations, response, request, fail_fast=fail_fast)
    passed = all(r.passed for r in results)
    logger.debug(f"{sum(r.passed for r in results)}/{len(results)} checks passed")

    if output == "json":
        typer.echo(json.dumps({
            "name": expectations.name,
            "passed": passed,
            "results": [r.to_dict() for r in results],
        }, indent=2, default=str))
    else:
        console.print(f"\n[bold]{expectations.name}[/bold]")
        print_results(results)
        if passed:
            console.print(f"[green]✅ {len(results)} check(s) passed[/green]")
        else:
            failed = sum(not r.passed for r in results)
            console.print(f"[red]❌ {failed} of {len(results)} check(s) failed[/red]")

    raise typer.Exit(code=0 if passed else 1)


@app.command()
def validate(
    expectations_file: Path = typer.Argument(
        ...,
        help="Path to the expectations YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate an expectations YAML file.

    Check the schema and report any errors without running the checks.
    """
    console.print(f"\n📄 Validating: {expectations_file}")

    expectations, validation = load_expectations(expectations_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid expectations:[/green] {expectations.name}")
    if expectations.request is not None:
        console.print(f"   Request: {expectations.request.method} {expectations.request.url}")
    if expectations.root:
        console.print(f"   Root: {expectations.root}")

    table = Table(title="Checks")
    table.add_column("Op", style="cyan")
    table.add_column("Path", style="magenta")
    table.add_column("Value")

    for item in expectations.checks:
        value = format_value(item.value) if item.op.takes_value else ""
        table.add_row(item.op.value, item.path, value)

    console.print()
    console.print(table)


if __name__ == "__main__":
    app()
