"""
Terminator parser mixin for eql statements.

After an operation's lists are parsed exactly one token may remain: the
punctuation that ends the statement. It selects the operation's modifier:

    .   none
    !   overwrite if existing   (Create, Add)
    ?   fail silently
"""

from __future__ import annotations

from collections.abc import Sequence

from .. import ir
from ..constants import TERMINATOR_MODIFIERS
from ..errors import ParseError, ParseErrorKind
from ..lexer import Token, TokenValue


def allowed_terminators(operation: ir.BaseOperation) -> list[TokenValue]:
    """Terminators whose modifier the operation accepts."""
    return [
        value
        for value, modifier in TERMINATOR_MODIFIERS.items()
        if modifier in operation.allowed_modifiers
    ]


class TerminatorParserMixin:
    """Parser mixin resolving a statement's trailing punctuation."""

    def resolve_terminator(
        self,
        tokens: Sequence[Token],
        operation: ir.BaseOperation,
        operation_token: Token,
    ) -> ir.BaseOperation:
        """
        Apply the statement terminator to a freshly built operation.

        Args:
            tokens: What is left of the statement after its lists
            operation: Operation built from the lists, modifier NONE
            operation_token: Keyword token of the statement

        Returns:
            Operation carrying the terminator's modifier

        Raises:
            ParseError: UNTERMINATED if nothing is left, INVALID_MODIFIER if
                the punctuation is not allowed for this operation
        """
        terminators = allowed_terminators(operation)
        operation_kind = ir.OperationKind(operation.keyword)

        if not tokens:
            raise ParseError(
                ParseErrorKind.UNTERMINATED,
                operation_kind,
                operation_token,
                None,
                terminators,
                "You didn't terminate your operation!",
            )
        if len(tokens) > 1:
            raise RuntimeError(
                f"{len(tokens)} tokens left after parsing {operation_kind} lists: {list(tokens)!r}"
            )

        token = tokens[0]
        modifier = TERMINATOR_MODIFIERS.get(token.value)
        result = operation.with_modifier(modifier) if modifier is not None else None
        if result is None:
            raise ParseError(
                ParseErrorKind.INVALID_MODIFIER,
                operation_kind,
                operation_token,
                token,
                terminators,
                f"{token.value} is not a valid modifier for the operation",
            )
        return result
