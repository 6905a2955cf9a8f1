"""
eql - pseudo-English department commands.

Turns sentences such as "Add Alice, Bob and Carol to Sales and Marketing!"
into structured operations, or fails with a caret-pointer diagnostic.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import EqlError, LexError, ManifestError, ParseError, ParseErrorKind
from .core.lexer import Token, TokenKind, TokenValue, tokenize
from .core.parser import is_input_complete, parse, tokenize_then_parse

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "EqlError",
    "LexError",
    "ParseError",
    "ParseErrorKind",
    "ManifestError",
    "Token",
    "TokenKind",
    "TokenValue",
    "tokenize",
    "parse",
    "tokenize_then_parse",
    "is_input_complete",
]
