"""
Error types for eql tokenizing, parsing and configuration.

``str(error)`` is always the full human-readable diagnostic: the offending
source line, a caret pointer under it, and when known the expected tokens
and a hint.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING

from .diagnostics import format_list, format_pointer, grapheme_length
from .ir import OperationKind

if TYPE_CHECKING:
    from .lexer import Token, TokenValue


class EqlError(Exception):
    """Base exception for all eql errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LexError(EqlError):
    """
    Raised when the tokenizer meets a segment it cannot classify.

    Examples:
    - Digits ("12345")
    - Symbols ("$", "+", "-")
    - Punctuation other than , . ! ?
    """

    def __init__(self, token: Token):
        self.token = token
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        token = self.token
        padding, pointer = format_pointer(token.value.text, token.column_number)
        return (
            f"Error on line {token.line_number}, column {token.column_number}: {token.value}\n"
            f"  {token.line.rstrip()}\n"
            f"  {padding}{pointer}"
        )


class ParseErrorKind(StrEnum):
    """What went wrong while parsing a statement."""

    UNEXPECTED_TOKEN = "unexpected_token"  # top level, not an operation keyword
    EMPTY_LIST = "empty_list"
    MALFORMED_LIST = "malformed_list"
    UNTERMINATED = "unterminated"
    INVALID_MODIFIER = "invalid_modifier"
    MISSING_DEPARTMENTS = "missing_departments"  # Remove ... from <nothing>


class ParseError(EqlError):
    """
    Raised when a token stream does not follow the statement grammar.

    Attributes:
        kind: Category of the failure
        operation_kind: Operation being parsed (UNKNOWN at top level)
        operation_token: Keyword token anchoring the statement
        unexpected_token: Token found where something else was expected
        expected_tokens: Token values that would have been accepted
        details: Free-text hint for the user
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        operation_kind: OperationKind,
        operation_token: Token,
        unexpected_token: Token | None = None,
        expected_tokens: Sequence[TokenValue] | None = None,
        details: str | None = None,
    ):
        self.kind = kind
        self.operation_kind = operation_kind
        self.operation_token = operation_token
        self.unexpected_token = unexpected_token
        self.expected_tokens = tuple(expected_tokens) if expected_tokens is not None else None
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        op_token = self.operation_token
        anchor = op_token
        if (
            self.unexpected_token is not None
            and self.unexpected_token.line_number == op_token.line_number
        ):
            anchor = self.unexpected_token

        if self.operation_kind is OperationKind.UNKNOWN:
            header = "Error"
        else:
            header = f"Error on {self.operation_kind} operation"
        padding, pointer = format_pointer(op_token.value.text, op_token.column_number)
        details = f"\n{self.details}" if self.details else ""
        return (
            f"{header} on line {anchor.line_number}, column {anchor.column_number}:\n"
            f"  {op_token.line.rstrip()}\n"
            f"  {padding}{pointer}"
            f"{self._format_unexpected()}{self._format_expected()}{details}"
        )

    def _format_unexpected(self) -> str:
        un_token = self.unexpected_token
        op_token = self.operation_token
        if un_token is None or un_token == op_token:
            return ""

        message = f"Unexpected {un_token.value}"
        if un_token.line_number != op_token.line_number:
            padding, pointer = format_pointer(un_token.value.text, un_token.column_number)
            return (
                f"\n{message} on line {un_token.line_number}, column {un_token.column_number}:\n"
                f"  {un_token.line.rstrip()}\n"
                f"  {padding}{pointer}"
            )

        # Continue the caret line that already underlines the keyword.
        offset = (
            un_token.column_number
            - op_token.column_number
            - grapheme_length(op_token.value.text)
            + 1
        )
        padding, pointer = format_pointer(un_token.value.text, offset)
        return f"{padding}{pointer}\n{message}"

    def _format_expected(self) -> str:
        if not self.expected_tokens:
            return ""
        instead = " instead" if self.unexpected_token is not None else ""
        return f"\nExpected {format_list(self.expected_tokens, ', ', 'or')}{instead}"


class ManifestError(EqlError):
    """
    Raised when an eql.toml configuration file is invalid.

    Examples:
    - Unknown output format
    - Unknown log level
    - Malformed TOML
    """

    pass
