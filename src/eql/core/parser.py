"""
Entry points of the tokenize -> parse pipeline.

    operations = tokenize_then_parse("Add Alice and Bob to Sales!")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from . import ir
from .lexer import Token, TokenKind, last_token_value, tokenize
from .parser_impl import Parser

logger = logging.getLogger(__name__)


def parse(tokens: Iterable[Token]) -> list[ir.BaseOperation]:
    """
    Parse a token stream into operations.

    Args:
        tokens: Tokens produced by ``tokenize``

    Returns:
        Operations in source order (empty when there are only whitespace tokens)

    Raises:
        ParseError: On the first statement that does not follow the grammar
    """
    operations = Parser(list(tokens)).parse()
    logger.debug("Parsed %d operations", len(operations))
    return operations


def tokenize_then_parse(source: str) -> list[ir.BaseOperation]:
    """
    Tokenize and parse ``source`` in one step.

    Raises:
        LexError: If the source contains a character outside letters,
            whitespace and ``, . ! ?``
        ParseError: If the token stream does not follow the grammar
    """
    return parse(tokenize(source))


def is_input_complete(source: str) -> bool:
    """
    Whether accumulated interactive input is ready to be parsed.

    Input is complete once its last non-whitespace segment is anything but
    a word: a terminator ends a statement, and any other punctuation or
    symbol is worth reporting right away.
    """
    last = last_token_value(source)
    return last is not None and last.kind is not TokenKind.WORD
