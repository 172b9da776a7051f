"""Resolved type representations for the tyck type system.

There are exactly three shapes of type: ``int``, ``bool`` and the arrow
``A -> R``.  Types are immutable and compared structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeGuard

# ── Resolved types ──────────────────────────────────────────────


@dataclass(frozen=True)
class IntType:
    def __str__(self) -> str:
        return type_name(self)


@dataclass(frozen=True)
class BoolType:
    def __str__(self) -> str:
        return type_name(self)


@dataclass(frozen=True)
class ArrowType:
    arg: Type
    ret: Type

    def __str__(self) -> str:
        return type_name(self)


Type = IntType | BoolType | ArrowType


# ── Built-in type constants ─────────────────────────────────────

INT = IntType()
BOOL = BoolType()


# ── Type utilities ──────────────────────────────────────────────


def arrow(arg: Type, ret: Type) -> ArrowType:
    """Build the function type ``arg -> ret``."""
    return ArrowType(arg, ret)


def arrow_chain(*types: Type) -> Type:
    """Fold *types* into a right-associated arrow.

    ``arrow_chain(INT, BOOL, INT)`` is ``int -> (bool -> int)``.
    """
    if not types:
        raise ValueError("arrow_chain() needs at least one type")
    result = types[-1]
    for ty in reversed(types[:-1]):
        result = ArrowType(ty, result)
    return result


def is_arrow(ty: Type) -> TypeGuard[ArrowType]:
    return isinstance(ty, ArrowType)


def type_name(ty: Type) -> str:
    """Canonical rendering used in diagnostics.

    Arrows associate to the right, so only an arrow in argument position
    needs parentheses: ``(int -> bool) -> int`` versus ``int -> bool -> int``.
    """
    if isinstance(ty, IntType):
        return "int"
    if isinstance(ty, BoolType):
        return "bool"
    if isinstance(ty, ArrowType):
        arg = type_name(ty.arg)
        if isinstance(ty.arg, ArrowType):
            arg = f"({arg})"
        return f"{arg} -> {type_name(ty.ret)}"
    raise TypeError(f"not a type: {ty!r}")
