"""
eql CLI package.

- app.py: typer application, global options, parse and check commands
- repl.py: interactive read loop
- utils.py: version output, logging setup, printing helpers
"""

from eql.cli.app import app, main
from eql.cli.utils import version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
