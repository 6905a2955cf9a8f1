"""
Base parser class for eql statements.

Provides the cursor over the token stream and statement slicing used by
the dispatcher and the parser mixins.
"""

from __future__ import annotations

from ..constants import TERMINATORS
from ..lexer import Token, TokenKind


def operation_tokens(tokens: list[Token]) -> list[Token]:
    """
    Slice a statement's tokens off the front of ``tokens``.

    The slice runs up to and including the first terminator, or to the end
    of the stream when the statement is not terminated.
    """
    for i, token in enumerate(tokens):
        if token.value in TERMINATORS:
            return tokens[: i + 1]
    return tokens


class BaseParser:
    """
    Base parser class with token navigation utilities.

    The dispatcher walks the stream one statement at a time; operation
    parsers only ever see the slice belonging to their own statement.
    """

    def __init__(self, tokens: list[Token]):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def current_token(self) -> Token:
        """Get current token."""
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        self.pos += 1
        return token

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.current_token().value.kind is TokenKind.WHITESPACE:
            self.advance()

    def take_statement(self) -> list[Token]:
        """Consume and return the tokens of the statement starting at the cursor."""
        statement = operation_tokens(self.tokens[self.pos :])
        self.pos += len(statement)
        return statement
