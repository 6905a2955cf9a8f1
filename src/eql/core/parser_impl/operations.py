"""
Operation parser mixin for eql statements.

Parses the body of each statement kind, after its keyword:

    Create Science, Engineering and Physics.
    Show HR?
    Add Mihai, Andrei and Ioan to Science and Engineering!
    Remove Michael from Physics?
    Remove Science.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from .. import ir
from ..constants import LINKER_FROM, LINKER_TO, LIST_ELEMENT, TERMINATORS
from ..errors import ParseError, ParseErrorKind
from ..lexer import Token
from .lists import ListError, ListErrorHandler, parse_list

REMOVE_LIST_TERMINATORS = (LINKER_FROM, *TERMINATORS)


class OperationParserMixin:
    """Parser mixin for the four statement kinds."""

    if TYPE_CHECKING:
        parse_named_list: Any
        resolve_terminator: Any

    def parse_create(self, op_token: Token, tokens: Sequence[Token]) -> ir.CreateOperation:
        """
        Grammar:
            Create dept_list terminator
        """
        handler = ListErrorHandler(ir.OperationKind.CREATE, op_token)
        departments, i = self.parse_named_list(tokens, TERMINATORS, "department", handler)
        return self.resolve_terminator(
            tokens[i:], ir.CreateOperation(departments=departments), op_token
        )

    def parse_show(self, op_token: Token, tokens: Sequence[Token]) -> ir.ShowOperation:
        """
        Grammar:
            Show dept_list terminator

        The ``!`` terminator is rejected when the modifier is resolved.
        """
        handler = ListErrorHandler(ir.OperationKind.SHOW, op_token)
        departments, i = self.parse_named_list(tokens, TERMINATORS, "department", handler)
        return self.resolve_terminator(
            tokens[i:], ir.ShowOperation(departments=departments), op_token
        )

    def parse_add(self, op_token: Token, tokens: Sequence[Token]) -> ir.AddOperation:
        """
        Grammar:
            Add name_list to dept_list terminator
        """
        handler = ListErrorHandler(ir.OperationKind.ADD, op_token)
        names, i = self.parse_named_list(tokens, (LINKER_TO,), "name", handler)
        if i >= len(tokens):
            raise ParseError(
                ParseErrorKind.MALFORMED_LIST,
                ir.OperationKind.ADD,
                op_token,
                None,
                (LINKER_TO,),
                f"You must follow the names with {LINKER_TO} and at least one department!",
            )

        rest = tokens[i + 1 :]
        departments, j = self.parse_named_list(rest, TERMINATORS, "department", handler)
        return self.resolve_terminator(
            rest[j:], ir.AddOperation(names=names, departments=departments), op_token
        )

    def parse_remove(self, op_token: Token, tokens: Sequence[Token]) -> ir.RemoveOperation:
        """
        Grammar:
            Remove name_list from dept_list terminator
            Remove dept_list terminator

        The first list is read up to ``from`` or a terminator. A second list
        is then tried after ``from``: when it has elements, the first list
        holds names and the second departments; otherwise the first list
        holds departments and no names are given.
        """
        handler = ListErrorHandler(ir.OperationKind.REMOVE, op_token)
        first, i = self.parse_named_list(
            tokens, REMOVE_LIST_TERMINATORS, "name or department", handler
        )

        has_from = i < len(tokens) and tokens[i].value == LINKER_FROM
        second: list[str] = []
        rest = tokens[i + 1 :] if has_from else tokens[i:]
        j = 0
        if has_from:
            try:
                second, j = parse_list(rest, TERMINATORS)
            except ListError as e:
                if e.kind is not ParseErrorKind.EMPTY_LIST:
                    raise handler.handle(e, TERMINATORS, "department") from None

        if second:
            names, departments = first, second
        elif has_from:
            raise ParseError(
                ParseErrorKind.MISSING_DEPARTMENTS,
                ir.OperationKind.REMOVE,
                op_token,
                tokens[i],
                LIST_ELEMENT,
                f"You must specify at least one department after {tokens[i].value}",
            )
        else:
            names, departments = [], first

        return self.resolve_terminator(
            rest[j:], ir.RemoveOperation(names=names, departments=departments), op_token
        )
