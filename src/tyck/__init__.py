"""tyck: type checker for a small explicitly-annotated expression language."""

from tyck.checker import Checker, typecheck
from tyck.environment import Environment
from tyck.errors import ErrorKind, TypeCheckError
from tyck.types import (
    BOOL,
    INT,
    ArrowType,
    BoolType,
    IntType,
    Type,
    arrow,
    arrow_chain,
    is_arrow,
    type_name,
)

__version__ = "0.1.0"

__all__ = [
    "BOOL",
    "INT",
    "ArrowType",
    "BoolType",
    "Checker",
    "Environment",
    "ErrorKind",
    "IntType",
    "Type",
    "TypeCheckError",
    "arrow",
    "arrow_chain",
    "is_arrow",
    "type_name",
    "typecheck",
]
