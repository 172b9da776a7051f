"""Shared test helpers for the tyck test suite."""

from __future__ import annotations

import pytest

from tyck.ast_nodes import (
    Apply,
    ArithBinOp,
    ArithOp,
    BooleanLit,
    CmpBinOp,
    CmpOp,
    Expr,
    Fun,
    IntegerLit,
    Var,
)
from tyck.checker import typecheck
from tyck.errors import ErrorKind, TypeCheckError
from tyck.types import Type


def check(expr: Expr) -> Type:
    """Check *expr*, asserting no errors. Returns its type."""
    try:
        return typecheck(expr)
    except TypeCheckError as e:
        pytest.fail(f"Unexpected error: {e}")


def check_fails(expr: Expr, kind: ErrorKind) -> TypeCheckError:
    """Check *expr*, asserting it fails with the given error kind."""
    with pytest.raises(TypeCheckError) as excinfo:
        typecheck(expr)
    err = excinfo.value
    assert err.kind is kind, f"Expected {kind.value} but got {err}"
    return err


# ── Tree shorthands ─────────────────────────────────────────────


def num(n: int) -> IntegerLit:
    return IntegerLit(n)


def true() -> BooleanLit:
    return BooleanLit(True)


def false() -> BooleanLit:
    return BooleanLit(False)


def var(name: str) -> Var:
    return Var(name)


def add(lhs: Expr, rhs: Expr) -> ArithBinOp:
    return ArithBinOp(ArithOp.ADD, lhs, rhs)


def mul(lhs: Expr, rhs: Expr) -> ArithBinOp:
    return ArithBinOp(ArithOp.MUL, lhs, rhs)


def eq(lhs: Expr, rhs: Expr) -> CmpBinOp:
    return CmpBinOp(CmpOp.EQ, lhs, rhs)


def lt(lhs: Expr, rhs: Expr) -> CmpBinOp:
    return CmpBinOp(CmpOp.LT, lhs, rhs)


def gt(lhs: Expr, rhs: Expr) -> CmpBinOp:
    return CmpBinOp(CmpOp.GT, lhs, rhs)


def app(fun: Expr, *args: Expr) -> Expr:
    """Left-nested application: ``app(f, x, y)`` is ``(f x) y``."""
    result = fun
    for arg in args:
        result = Apply(result, arg)
    return result


def fun(name: str, arg_name: str, arg_type: Type, return_type: Type, body: Expr) -> Fun:
    return Fun(name, arg_name, arg_type, return_type, body)
