"""AST node definitions for the tyck expression language.

The tree is produced by an external parser; type annotations arrive
already resolved to :mod:`tyck.types` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from tyck.types import Type, type_name

# ── Operators ────────────────────────────────────────────────────


class ArithOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class CmpOp(Enum):
    EQ = "=="
    LT = "<"
    GT = ">"


# ── Expressions ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class IntegerLit:
    value: int


@dataclass(frozen=True)
class BooleanLit:
    value: bool


@dataclass(frozen=True)
class ArithBinOp:
    op: ArithOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class CmpBinOp:
    op: CmpOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class If:
    cond: Expr
    then: Expr
    else_: Expr


@dataclass(frozen=True)
class Fun:
    """``fun name (arg_name: arg_type): return_type is body``"""

    name: str
    arg_name: str
    arg_type: Type
    return_type: Type
    body: Expr


@dataclass(frozen=True)
class LetFun:
    fun: Fun
    body: Expr


@dataclass(frozen=True)
class LetRec:
    """``let rec fun ... and fun ... in body``"""

    funs: tuple[Fun, ...]
    body: Expr


@dataclass(frozen=True)
class Apply:
    fun: Expr
    arg: Expr


Literal = Union[IntegerLit, BooleanLit]

Expr = Union[
    Var, IntegerLit, BooleanLit, ArithBinOp, CmpBinOp,
    If, Fun, LetFun, LetRec, Apply,
]


# ── Rendering ────────────────────────────────────────────────────


def expr_text(expr: Expr) -> str:
    """Compact prefix rendering of *expr*, used inside error messages."""
    if isinstance(expr, Var):
        return expr.name
    if isinstance(expr, BooleanLit):
        return "true" if expr.value else "false"
    if isinstance(expr, IntegerLit):
        return str(expr.value)
    if isinstance(expr, (ArithBinOp, CmpBinOp)):
        return f"({expr.op.value} {expr_text(expr.lhs)} {expr_text(expr.rhs)})"
    if isinstance(expr, If):
        return (
            f"(if {expr_text(expr.cond)} "
            f"{expr_text(expr.then)} {expr_text(expr.else_)})"
        )
    if isinstance(expr, Fun):
        return (
            f"(fun {expr.name} ({expr.arg_name}: {type_name(expr.arg_type)}): "
            f"{type_name(expr.return_type)} {expr_text(expr.body)})"
        )
    if isinstance(expr, LetFun):
        return f"(let {expr_text(expr.fun)} {expr_text(expr.body)})"
    if isinstance(expr, LetRec):
        funs = " ".join(expr_text(f) for f in expr.funs)
        return f"(let rec {funs} {expr_text(expr.body)})"
    if isinstance(expr, Apply):
        return f"({expr_text(expr.fun)} {expr_text(expr.arg)})"
    raise TypeError(f"not an expression: {expr!r}")


# ── Traversal ────────────────────────────────────────────────────


def children(expr: Expr) -> tuple[Expr, ...]:
    """Direct sub-expressions of *expr*, in source order."""
    if isinstance(expr, (Var, IntegerLit, BooleanLit)):
        return ()
    if isinstance(expr, (ArithBinOp, CmpBinOp)):
        return (expr.lhs, expr.rhs)
    if isinstance(expr, If):
        return (expr.cond, expr.then, expr.else_)
    if isinstance(expr, Fun):
        return (expr.body,)
    if isinstance(expr, LetFun):
        return (expr.fun, expr.body)
    if isinstance(expr, LetRec):
        return (*expr.funs, expr.body)
    if isinstance(expr, Apply):
        return (expr.fun, expr.arg)
    raise TypeError(f"not an expression: {expr!r}")


def tree_depth(expr: Expr) -> int:
    """Nesting depth of *expr*; a leaf has depth 1. Does not recurse."""
    deepest = 0
    stack = [(expr, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children(node))
    return deepest
