"""
eql command-line application.

    eql parse "Add Alice and Bob to Sales!"
    eql parse --file commands.txt --format json
    eql check --file commands.txt
    eql repl
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from eql.cli.repl import repl_command
from eql.cli.utils import (
    configure_logging,
    console,
    print_error,
    print_operations,
    version_callback,
)
from eql.core import ir
from eql.core.errors import EqlError, ManifestError
from eql.core.manifest import LOG_LEVELS, EqlConfig, load_config
from eql.core.parser import tokenize_then_parse

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="""eql - department commands in plain English

Statements:
  Create Science and Engineering.
  Add Alice, Bob and Carol to Sales!
  Remove Bob from Sales?
  Show Sales.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to eql.toml (default: ./eql.toml if present)"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured log level"),
    ] = None,
) -> None:
    """eql CLI main callback for global options."""
    try:
        eql_config = load_config(config)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    level = (log_level or eql_config.logging.level).upper()
    if level not in LOG_LEVELS:
        typer.echo(
            f"Error: unknown log level {log_level!r} (expected one of: {', '.join(LOG_LEVELS)})",
            err=True,
        )
        raise typer.Exit(code=2)

    configure_logging(level)
    ctx.obj = eql_config


def _read_source(text: str | None, file: Path | None) -> str:
    if text is not None and file is not None:
        typer.echo("Error: pass either TEXT or --file, not both", err=True)
        raise typer.Exit(code=2)
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: cannot read {file}: {e}", err=True)
            raise typer.Exit(code=2)
    if text is not None:
        return text
    return sys.stdin.read()


def _parse_or_exit(source: str) -> list[ir.BaseOperation]:
    try:
        return tokenize_then_parse(source)
    except EqlError as e:
        print_error(e)
        raise typer.Exit(code=1)


@app.command(name="parse")
def parse_command(
    ctx: typer.Context,
    text: Annotated[str | None, typer.Argument(help="Statements to parse (default: stdin)")] = None,
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="Read statements from a file")
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", help="Output format: text or json (default from config)"),
    ] = None,
) -> None:
    """
    Parse statements and print the resulting operations.

    Exits with code 1 and prints the diagnostic on stderr if the input does
    not tokenize or parse.
    """
    config: EqlConfig = ctx.obj
    output = config.output
    if output_format is not None:
        if output_format not in ("text", "json"):
            typer.echo(f"Error: unknown format {output_format!r} (expected text or json)", err=True)
            raise typer.Exit(code=2)
        output = replace(output, format=output_format)

    operations = _parse_or_exit(_read_source(text, file))
    logger.info("Parsed %d operations", len(operations))
    print_operations(operations, output)


@app.command(name="check")
def check_command(
    text: Annotated[str | None, typer.Argument(help="Statements to check (default: stdin)")] = None,
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="Read statements from a file")
    ] = None,
) -> None:
    """Check that statements parse, without printing them."""
    operations = _parse_or_exit(_read_source(text, file))
    console.print(f"OK ({len(operations)} operations)", markup=False)


app.command(name="repl")(repl_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
