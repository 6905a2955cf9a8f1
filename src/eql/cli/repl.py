"""
Interactive read loop.

Lines are accumulated until the input ends in something other than a word
(normally a terminator), then the whole buffer is parsed and the operations
or the diagnostic are printed. The loop ends on EOF.
"""

from __future__ import annotations

import logging

import typer

from eql.cli.utils import console, print_error, print_operations
from eql.core.errors import EqlError
from eql.core.manifest import EqlConfig
from eql.core.parser import is_input_complete, tokenize_then_parse

logger = logging.getLogger(__name__)


def read_statement(prompt: str, continuation_prompt: str) -> str | None:
    """
    Read lines until the accumulated input is complete.

    Returns:
        The accumulated input, or None on EOF or Ctrl-C before it completed
    """
    lines: list[str] = []
    while True:
        try:
            line = console.input(continuation_prompt if lines else prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return None
        if not lines and not line.strip():
            continue
        lines.append(line)
        source = "\n".join(lines)
        if is_input_complete(source):
            return source


def repl_command(ctx: typer.Context) -> None:
    """
    Start an interactive session.

    Each complete input is parsed and its operations are printed as
    "<index>: <operation>"; errors are printed and the session continues.
    """
    config: EqlConfig = ctx.obj
    while True:
        source = read_statement(config.repl.prompt, config.repl.continuation_prompt)
        if source is None:
            break

        try:
            operations = tokenize_then_parse(source)
        except EqlError as e:
            logger.debug("Rejected input: %r", source)
            print_error(e)
            continue
        print_operations(operations, config.output)
