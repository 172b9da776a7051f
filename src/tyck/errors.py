"""Type-checking errors.

Checking is fail-fast: the first problem found raises a single
:class:`TypeCheckError` and aborts the whole check.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tyck.ast_nodes import expr_text
from tyck.types import type_name

if TYPE_CHECKING:
    from tyck.ast_nodes import Expr, Fun
    from tyck.types import Type


class ErrorKind(Enum):
    """Closed set of checking failures, valued by diagnostic code."""

    DUPLICATE_DEFINITION = "E301"
    UNBOUND_VARIABLE = "E310"
    TYPE_MISMATCH = "E321"
    ARM_MISMATCH = "E323"
    NOT_A_FUNCTION = "E340"


class TypeCheckError(Exception):
    """A terminal checking failure with a human-readable message."""

    def __init__(self, kind: ErrorKind, message: str, **details: Any) -> None:
        self.kind = kind
        self.message = message
        self.details = MappingProxyType(details)
        super().__init__(f"{kind.value}: {message}")

    @property
    def code(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"TypeCheckError({self.kind.name}, {self.message!r})"


# ── Constructors ────────────────────────────────────────────────


def unbound_variable(name: str) -> TypeCheckError:
    return TypeCheckError(
        ErrorKind.UNBOUND_VARIABLE,
        f"Unbound variable: {name}",
        name=name,
    )


def type_mismatch(expected: Type, actual: Type, expr: Expr) -> TypeCheckError:
    return TypeCheckError(
        ErrorKind.TYPE_MISMATCH,
        f"Expected {type_name(expected)}, got {type_name(actual)} "
        f"in {expr_text(expr)}",
        expected=expected, actual=actual, expr=expr,
    )


def arm_mismatch(then_type: Type, else_type: Type) -> TypeCheckError:
    return TypeCheckError(
        ErrorKind.ARM_MISMATCH,
        f"Arms of an if have different types: "
        f"{type_name(then_type)}, {type_name(else_type)}",
        then_type=then_type, else_type=else_type,
    )


def not_a_function(expr: Expr, actual: Type) -> TypeCheckError:
    return TypeCheckError(
        ErrorKind.NOT_A_FUNCTION,
        f"Not a function: {expr_text(expr)}",
        expr=expr, actual=actual,
    )


def duplicate_definition(funs: tuple[Fun, ...]) -> TypeCheckError:
    names = tuple(f.name for f in funs)
    return TypeCheckError(
        ErrorKind.DUPLICATE_DEFINITION,
        f"Duplicate definitions in letrec: {', '.join(names)}",
        names=names,
    )
