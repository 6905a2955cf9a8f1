"""
eql statement parser package.

The parser is built from mixins that separate list parsing, terminator
resolution and the per-operation grammar; ``Parser`` combines them and
dispatches each statement on its keyword.

Usage:
    from eql.core.parser_impl import Parser

    operations = Parser(tokens).parse()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .. import ir
from ..constants import KEYWORD_ADD, KEYWORD_CREATE, KEYWORD_REMOVE, KEYWORD_SHOW, KEYWORDS
from ..errors import ParseError, ParseErrorKind
from ..lexer import Token, TokenValue
from .base import BaseParser, operation_tokens
from .lists import ListError, ListErrorHandler, ListParserMixin, parse_list
from .operations import OperationParserMixin
from .terminators import TerminatorParserMixin, allowed_terminators

logger = logging.getLogger(__name__)

OperationParseFn = Callable[[Token, Sequence[Token]], ir.BaseOperation]


class Parser(
    BaseParser,
    ListParserMixin,
    TerminatorParserMixin,
    OperationParserMixin,
):
    """
    Complete eql statement parser.

    - ListParserMixin: comma/"and" separated lists with error context
    - TerminatorParserMixin: trailing punctuation to modifier
    - OperationParserMixin: Create, Show, Add and Remove statements
    """

    def _operation_parsers(self) -> dict[TokenValue, OperationParseFn]:
        return {
            KEYWORD_ADD: self.parse_add,
            KEYWORD_CREATE: self.parse_create,
            KEYWORD_REMOVE: self.parse_remove,
            KEYWORD_SHOW: self.parse_show,
        }

    def parse(self) -> list[ir.BaseOperation]:
        """
        Parse every statement in the token stream.

        Returns:
            Operations in source order

        Raises:
            ParseError: On the first statement that fails; operations parsed
                before it are discarded
        """
        parsers = self._operation_parsers()
        operations: list[ir.BaseOperation] = []

        while True:
            self.skip_whitespace()
            if self.at_end():
                break

            token = self.current_token()
            parse_operation = parsers.get(token.value)
            if parse_operation is None:
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    ir.OperationKind.UNKNOWN,
                    token,
                    token,
                    KEYWORDS,
                    "You must input an operation!",
                )

            self.advance()
            statement = self.take_statement()
            logger.debug(
                "Parsing %s statement at %d:%d (%d tokens)",
                token.value.text,
                token.line_number,
                token.column_number,
                len(statement),
            )
            operations.append(parse_operation(token, statement))

        return operations


__all__ = [
    "BaseParser",
    "ListError",
    "ListErrorHandler",
    "Parser",
    "allowed_terminators",
    "operation_tokens",
    "parse_list",
]
