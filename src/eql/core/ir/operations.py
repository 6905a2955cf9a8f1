"""
Operation types for eql IR.

One frozen model per command kind, combined into the discriminated
``Operation`` union. Models render back to English both as a confirmation
phrase (``str(op)``) and as a parseable statement (``op.to_statement()``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ..diagnostics import format_list


class Modifier(StrEnum):
    """Runtime behaviour requested by a statement's terminator."""

    NONE = "none"
    OVERWRITE = "overwrite"
    FAIL_SILENTLY = "fail_silently"

    @property
    def description(self) -> str:
        return _MODIFIER_DESCRIPTIONS[self]

    @property
    def terminator(self) -> str:
        return _MODIFIER_TERMINATORS[self]


_MODIFIER_DESCRIPTIONS = {
    Modifier.NONE: "",
    Modifier.OVERWRITE: "overwrite if existing",
    Modifier.FAIL_SILENTLY: "fail silently",
}

_MODIFIER_TERMINATORS = {
    Modifier.NONE: ".",
    Modifier.OVERWRITE: "!",
    Modifier.FAIL_SILENTLY: "?",
}


class OperationKind(StrEnum):
    """Command kinds, valued by their keyword."""

    UNKNOWN = "Unknown"
    ADD = "Add"
    CREATE = "Create"
    REMOVE = "Remove"
    SHOW = "Show"


class BaseOperation(BaseModel):
    """
    Fields and behaviour shared by every operation kind.

    Mutators never modify in place: they return a new operation, or None
    when the change does not apply to this kind.
    """

    allowed_modifiers: ClassVar[frozenset[Modifier]] = frozenset(Modifier)

    modifier: Modifier = Modifier.NONE

    model_config = ConfigDict(frozen=True)

    @field_validator("modifier")
    @classmethod
    def validate_modifier(cls, v: Modifier) -> Modifier:
        if v not in cls.allowed_modifiers:
            raise ValueError(f"{v} is not a valid modifier for {cls.__name__}")
        return v

    @property
    def keyword(self) -> str:
        return str(self.kind)  # type: ignore[attr-defined]

    def _replace(self, **changes: object) -> Self:
        return type(self)(**{**dict(self), **changes})

    def with_modifier(self, modifier: Modifier) -> Self | None:
        if modifier not in self.allowed_modifiers:
            return None
        return self._replace(modifier=modifier)

    def get_names(self) -> list[str] | None:
        return None

    def get_departments(self) -> list[str] | None:
        return None

    def with_names(self, names: list[str]) -> Self | None:
        return None

    def with_departments(self, departments: list[str]) -> Self | None:
        if self.get_departments() is None or not departments:
            return None
        return self._replace(departments=list(departments))

    def _format_modifier(self) -> str:
        if self.modifier is Modifier.NONE:
            return ""
        return f" ({self.modifier.description})"

    def to_statement(self) -> str:
        """Canonical source text that parses back to an equal operation."""
        return f"{self._render()}{self.modifier.terminator}"

    def _render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"{self._render()}{self._format_modifier()}"


class CreateOperation(BaseOperation):
    """Create one or more departments."""

    kind: Literal[OperationKind.CREATE] = OperationKind.CREATE
    departments: list[str] = Field(min_length=1)

    def get_departments(self) -> list[str] | None:
        return self.departments

    def _render(self) -> str:
        return f"{self.kind} {format_list(self.departments)}"


class AddOperation(BaseOperation):
    """Add named members to one or more departments."""

    kind: Literal[OperationKind.ADD] = OperationKind.ADD
    names: list[str] = Field(min_length=1)
    departments: list[str] = Field(min_length=1)

    def get_names(self) -> list[str] | None:
        return self.names

    def get_departments(self) -> list[str] | None:
        return self.departments

    def with_names(self, names: list[str]) -> Self | None:
        if not names:
            return None
        return self._replace(names=list(names))

    def _render(self) -> str:
        return f"{self.kind} {format_list(self.names)} to {format_list(self.departments)}"


class RemoveOperation(BaseOperation):
    """
    Remove members from departments, or whole departments.

    An empty ``names`` list means the departments themselves are removed.
    """

    allowed_modifiers: ClassVar[frozenset[Modifier]] = frozenset(
        {Modifier.NONE, Modifier.FAIL_SILENTLY}
    )

    kind: Literal[OperationKind.REMOVE] = OperationKind.REMOVE
    names: list[str] = Field(default_factory=list)
    departments: list[str] = Field(min_length=1)

    def get_names(self) -> list[str] | None:
        return self.names

    def get_departments(self) -> list[str] | None:
        return self.departments

    def with_names(self, names: list[str]) -> Self | None:
        return self._replace(names=list(names))

    def _render(self) -> str:
        if not self.names:
            return f"{self.kind} {format_list(self.departments)}"
        return f"{self.kind} {format_list(self.names)} from {format_list(self.departments)}"


class ShowOperation(BaseOperation):
    """Show the members of one or more departments."""

    allowed_modifiers: ClassVar[frozenset[Modifier]] = frozenset(
        {Modifier.NONE, Modifier.FAIL_SILENTLY}
    )

    kind: Literal[OperationKind.SHOW] = OperationKind.SHOW
    departments: list[str] = Field(min_length=1)

    def get_departments(self) -> list[str] | None:
        return self.departments

    def _render(self) -> str:
        return f"{self.kind} {format_list(self.departments)}"


class UnknownOperation(BaseOperation):
    """Placeholder for a statement that is not (yet) a valid operation."""

    allowed_modifiers: ClassVar[frozenset[Modifier]] = frozenset({Modifier.NONE})

    kind: Literal[OperationKind.UNKNOWN] = OperationKind.UNKNOWN

    def with_modifier(self, modifier: Modifier) -> Self | None:
        return None

    def to_statement(self) -> str:
        return str(self.kind)

    def _render(self) -> str:
        return str(self.kind)


Operation = Annotated[
    CreateOperation | AddOperation | RemoveOperation | ShowOperation | UnknownOperation,
    Field(discriminator="kind"),
]

operation_list_adapter: TypeAdapter[list[Operation]] = TypeAdapter(list[Operation])
