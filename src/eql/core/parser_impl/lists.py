"""
List parser mixin for eql statements.

Parses comma/"and" separated lists of names or departments:

    Moraru   Mihaela, Mircea Ioan and Amalia Brad.
    Science, Engineering, and Physics!

A list ends at one of the caller's terminators (left unconsumed) or at the
end of the statement. Multi-word elements keep one space between words.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from ..constants import (
    LINKER_AND,
    LIST_ELEMENT,
    RESERVED,
    SEPARATOR_VALUES,
    TERMINATORS,
)
from ..errors import ParseError, ParseErrorKind
from ..ir import OperationKind
from ..lexer import Token, TokenKind, TokenValue

LIST_SEPARATORS = (SEPARATOR_VALUES, LINKER_AND)


class ListError(Exception):
    """
    Internal failure of ``parse_list``.

    Carries only what the list parser knows; ``ListErrorHandler`` adds the
    operation context and turns it into a ``ParseError``.
    """

    def __init__(self, kind: ParseErrorKind, unexpected_token: Token | None):
        self.kind = kind
        self.unexpected_token = unexpected_token
        super().__init__(f"{kind}: {unexpected_token!r}")


def join_element(tokens: Sequence[Token]) -> str:
    """Join an element's words, collapsing each whitespace run to one space."""
    parts: list[str] = []
    for token in tokens:
        if token.value.kind is TokenKind.WHITESPACE:
            if parts and parts[-1] != " ":
                parts.append(" ")
        else:
            parts.append(token.value.text)
    return "".join(parts).rstrip(" ")


def parse_list(
    tokens: Sequence[Token], terminators: Collection[TokenValue]
) -> tuple[list[str], int]:
    """
    Parse one list off the front of ``tokens``.

    Args:
        tokens: Statement tokens, starting where the list starts
        terminators: Token values that end the list

    Returns:
        Tuple of (elements, index of the terminator or ``len(tokens)``)

    Raises:
        ListError: EMPTY_LIST when no element precedes the end of the list,
            MALFORMED_LIST for stray separators, reserved words, or tokens
            that cannot appear in a list
    """
    elements: list[str] = []
    pending: list[Token] = []
    last_separator: Token | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        value = token.value

        if value in terminators:
            break

        if value.kind is TokenKind.WHITESPACE:
            if pending:
                pending.append(token)

        elif value in LIST_SEPARATORS:
            if pending:
                elements.append(join_element(pending))
                pending = []
                last_separator = token
            elif (
                value == LINKER_AND
                and last_separator is not None
                and last_separator.value == SEPARATOR_VALUES
            ):
                # "A, B, and C"
                last_separator = token
            elif elements:
                raise ListError(ParseErrorKind.MALFORMED_LIST, token)
            else:
                raise ListError(ParseErrorKind.EMPTY_LIST, token)

        elif value.kind is TokenKind.WORD:
            if value in RESERVED:
                raise ListError(ParseErrorKind.MALFORMED_LIST, token)
            pending.append(token)
            last_separator = None

        elif elements or pending:
            raise ListError(ParseErrorKind.MALFORMED_LIST, token)
        else:
            raise ListError(ParseErrorKind.EMPTY_LIST, token)

        i += 1

    if pending:
        elements.append(join_element(pending))
    elif last_separator is not None:
        raise ListError(ParseErrorKind.MALFORMED_LIST, last_separator)

    if not elements:
        end_token = tokens[i] if i < len(tokens) else (tokens[-1] if tokens else None)
        raise ListError(ParseErrorKind.EMPTY_LIST, end_token)

    return elements, i


class ListErrorHandler:
    """Turns ``ListError`` into ``ParseError`` for one statement."""

    def __init__(self, operation_kind: OperationKind, operation_token: Token):
        self.operation_kind = operation_kind
        self.operation_token = operation_token

    def handle(
        self, error: ListError, terminators: Sequence[TokenValue], name: str
    ) -> ParseError:
        """
        Build the user-facing error.

        Args:
            error: Failure reported by ``parse_list``
            terminators: Terminators the failing list accepted
            name: What the list holds ("name", "department", ...)
        """
        unexpected = error.unexpected_token
        if error.kind is ParseErrorKind.EMPTY_LIST:
            details = f"You must specify at least one {name}"
            if unexpected is not None:
                role = _token_role(unexpected.value, terminators)
                details += f" before {role} {unexpected.value}"
            return ParseError(
                ParseErrorKind.EMPTY_LIST,
                self.operation_kind,
                self.operation_token,
                unexpected,
                LIST_ELEMENT,
                details,
            )

        if unexpected is not None and _is_misused_reserved(unexpected.value):
            details = f"Can't use {unexpected.value} in lists, it's reserved!"
        else:
            details = f"The {name} list you entered is invalid!"
        return ParseError(
            error.kind,
            self.operation_kind,
            self.operation_token,
            unexpected,
            (*LIST_ELEMENT, *terminators),
            details,
        )


def _is_misused_reserved(value: TokenValue) -> bool:
    return value in RESERVED and value != LINKER_AND


def _token_role(value: TokenValue, terminators: Sequence[TokenValue]) -> str:
    if value in terminators:
        return "list terminator"
    if value in TERMINATORS:
        return "operation terminator"
    return "list element separator"


class ListParserMixin:
    """Parser mixin wrapping ``parse_list`` with operation-aware errors."""

    def parse_named_list(
        self,
        tokens: Sequence[Token],
        terminators: Sequence[TokenValue],
        name: str,
        handler: ListErrorHandler,
    ) -> tuple[list[str], int]:
        try:
            return parse_list(tokens, terminators)
        except ListError as e:
            raise handler.handle(e, terminators, name) from None
