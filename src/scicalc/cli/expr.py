"""
Expression CLI commands.

- eval:      Evaluate an expression and print the result
- tokens:    Show the token stream for an expression
- parse:     Show the fully parenthesised parse of an expression
- functions: List supported functions and constants
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from scicalc.cli.utils import configure_logging, load_cli_config
from scicalc.core.config import DEFAULT_MAX_DEPTH, EngineConfig
from scicalc.core.errors import CalcError, ConfigError, ErrorContext
from scicalc.core.expression_lang import (
    CONSTANTS,
    FUNCTIONS,
    calculate,
    format_result,
    parse_expr,
    tokenize,
)
from scicalc.service import CalculationFailure, CalculationRequest, calculate_request

console = Console()


def _report_error(source: str, error: CalcError) -> None:
    """Print an evaluation error, with a marker under the offending column."""
    if error.pos is not None:
        typer.echo(ErrorContext(source=source, column=error.pos).format(), err=True)
    typer.echo(f"Error [{error.kind}]: {error.message}", err=True)


def _load_config_or_exit(config: Path | None, degrees: bool, precision: int | None) -> EngineConfig:
    try:
        return load_cli_config(config, degrees=degrees, precision=precision)
    except ConfigError as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        raise typer.Exit(code=2)


def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '2 + 3 * 4'"),
    degrees: bool = typer.Option(
        False, "--degrees", "-d", help="Interpret sin/cos/tan arguments as degrees"
    ),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=1, max=17, help="Significant digits in the result"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the response mapping as JSON"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to scicalc.toml (default: $SCICALC_CONFIG or ./scicalc.toml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Evaluate an expression and print the result."""
    configure_logging(verbose)
    engine_config = _load_config_or_exit(config, degrees, precision)

    if as_json:
        response = calculate_request(CalculationRequest(expression=expression), engine_config)
        typer.echo(json.dumps(response.model_dump(mode="json")))
        if isinstance(response, CalculationFailure):
            raise typer.Exit(code=1)
        return

    try:
        value = calculate(expression, engine_config)
    except CalcError as e:
        _report_error(expression, e)
        raise typer.Exit(code=1)

    typer.echo(format_result(value, engine_config.precision))


def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the token stream for an expression."""
    try:
        tokens = tokenize(expression)
    except CalcError as e:
        _report_error(expression, e)
        raise typer.Exit(code=1)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Value")
    table.add_column("Position", justify="right")
    for tok in tokens:
        table.add_row(tok.kind.name, tok.value, str(tok.pos))
    console.print(table)


def parse_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "--max-depth", min=1, max=128, help="Maximum nesting depth"
    ),
) -> None:
    """Show the fully parenthesised parse of an expression."""
    try:
        expr = parse_expr(expression, max_depth)
    except CalcError as e:
        _report_error(expression, e)
        raise typer.Exit(code=1)

    typer.echo(str(expr))


def functions_command() -> None:
    """List supported functions and constants."""
    table = Table(title="Functions")
    table.add_column("Name", style="cyan")
    table.add_column("Arity", justify="right")
    table.add_column("Description")
    for spec in FUNCTIONS.values():
        table.add_row(spec.name, str(spec.arity), spec.description)
    console.print(table)

    console.print("Constants: " + ", ".join(f"{name} = {value!r}" for name, value in CONSTANTS.items()))
