"""
Intermediate representation produced by the eql parser.

Re-exports the operation models so callers can write ``ir.AddOperation``.
"""

from .operations import (
    AddOperation,
    BaseOperation,
    CreateOperation,
    Modifier,
    Operation,
    OperationKind,
    RemoveOperation,
    ShowOperation,
    UnknownOperation,
    operation_list_adapter,
)

__all__ = [
    "AddOperation",
    "BaseOperation",
    "CreateOperation",
    "Modifier",
    "Operation",
    "OperationKind",
    "RemoveOperation",
    "ShowOperation",
    "UnknownOperation",
    "operation_list_adapter",
]
