"""
eql CLI utilities.

Shared helpers used by the CLI commands: version output, logging setup and
printing of operations and diagnostics.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Sequence

import typer
from rich.console import Console

from eql._version import get_version
from eql.core import ir
from eql.core.errors import EqlError
from eql.core.manifest import OutputConfig

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"eql version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Configure root logging once for the CLI process; ``level`` is a validated level name."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
    )


def format_operations(operations: Sequence[ir.BaseOperation], output: OutputConfig) -> str:
    """Render operations as text lines or as a JSON array."""
    if output.format == "json":
        return ir.operation_list_adapter.dump_json(list(operations), indent=2).decode()
    if output.show_index:
        return "\n".join(f"{i}: {op}" for i, op in enumerate(operations))
    return "\n".join(str(op) for op in operations)


def print_operations(operations: Sequence[ir.BaseOperation], output: OutputConfig) -> None:
    if not operations and output.format != "json":
        return
    console.print(format_operations(operations, output), markup=False)


def print_error(error: EqlError) -> None:
    """Print an error's caret diagnostic on stderr."""
    err_console.print(str(error), markup=False)
