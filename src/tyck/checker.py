"""Type checker for the tyck expression language.

Checking is a single structural pass over an already-parsed tree.  Every
function carries explicit annotations, so nothing is inferred: each node's
type is computed from its children and compared for structural equality
against what the context demands.  The first failure raises
:class:`~tyck.errors.TypeCheckError`.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

from tyck.ast_nodes import (
    Apply,
    ArithBinOp,
    BooleanLit,
    CmpBinOp,
    Expr,
    Fun,
    If,
    IntegerLit,
    LetFun,
    LetRec,
    Var,
    tree_depth,
)
from tyck.environment import Environment
from tyck.errors import (
    arm_mismatch,
    duplicate_definition,
    not_a_function,
    type_mismatch,
    unbound_variable,
)
from tyck.types import BOOL, INT, ArrowType, Type, arrow, is_arrow

# Python frames spent per level of tree nesting (LetFun is the deepest path)
_FRAMES_PER_LEVEL = 4


@contextmanager
def _recursion_headroom(depth: int) -> Iterator[None]:
    """Raise the interpreter recursion limit enough to walk *depth* levels."""
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(old_limit + depth * _FRAMES_PER_LEVEL)
    try:
        yield
    finally:
        sys.setrecursionlimit(old_limit)


class Checker:
    """Checks one expression tree at a time against an environment."""

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env if env is not None else Environment.empty()

    # ── Public API ──────────────────────────────────────────────

    def check(self, expr: Expr) -> Type:
        """Return the type of *expr*. Raises TypeCheckError on failure."""
        with _recursion_headroom(tree_depth(expr)):
            return self._infer_expr(expr)

    # ── Helpers ─────────────────────────────────────────────────

    def _expect(self, expr: Expr, expected: Type) -> Type:
        actual = self._infer_expr(expr)
        if actual != expected:
            raise type_mismatch(expected, actual, expr)
        return actual

    # ── Expression checking ─────────────────────────────────────

    def _infer_expr(self, expr: Expr) -> Type:
        if isinstance(expr, Var):
            return self._infer_var(expr)
        if isinstance(expr, IntegerLit):
            return INT
        if isinstance(expr, BooleanLit):
            return BOOL
        if isinstance(expr, ArithBinOp):
            self._expect(expr.lhs, INT)
            self._expect(expr.rhs, INT)
            return INT
        if isinstance(expr, CmpBinOp):
            # == included: there is no equality on booleans
            self._expect(expr.lhs, INT)
            self._expect(expr.rhs, INT)
            return BOOL
        if isinstance(expr, If):
            return self._infer_if(expr)
        if isinstance(expr, Fun):
            return self._check_fun(expr)
        if isinstance(expr, LetFun):
            return self._infer_let_fun(expr)
        if isinstance(expr, LetRec):
            return self._infer_let_rec(expr)
        if isinstance(expr, Apply):
            return self._infer_apply(expr)
        raise TypeError(f"not an expression: {expr!r}")

    def _infer_var(self, expr: Var) -> Type:
        ty = self.env.lookup(expr.name)
        if ty is None:
            raise unbound_variable(expr.name)
        return ty

    def _infer_if(self, expr: If) -> Type:
        self._expect(expr.cond, BOOL)
        then_type = self._infer_expr(expr.then)
        else_type = self._infer_expr(expr.else_)
        if then_type != else_type:
            raise arm_mismatch(then_type, else_type)
        return then_type

    def _check_fun(self, fun: Fun) -> Type:
        """Check a function body with its argument and its own name bound."""
        own_type = fun_type(fun)
        bindings = [(fun.arg_name, fun.arg_type), (fun.name, own_type)]
        with self.env.scope(bindings):
            self._expect(fun.body, fun.return_type)
        return own_type

    def _infer_let_fun(self, expr: LetFun) -> Type:
        own_type = self._check_fun(expr.fun)
        return self.env.with_bindings(
            [(expr.fun.name, own_type)],
            lambda _env: self._infer_expr(expr.body),
        )

    def _infer_let_rec(self, expr: LetRec) -> Type:
        names = {f.name for f in expr.funs}
        if len(names) != len(expr.funs):
            raise duplicate_definition(expr.funs)

        # Signatures go in before any body is looked at
        bindings = [(f.name, fun_type(f)) for f in expr.funs]
        with self.env.scope(bindings):
            for fun in expr.funs:
                self._check_fun(fun)
            return self._infer_expr(expr.body)

    def _infer_apply(self, expr: Apply) -> Type:
        callee = self._infer_expr(expr.fun)
        if not is_arrow(callee):
            raise not_a_function(expr.fun, callee)
        self._expect(expr.arg, callee.arg)
        return callee.ret


def fun_type(fun: Fun) -> ArrowType:
    """The declared type of *fun*, from its signature alone."""
    return arrow(fun.arg_type, fun.return_type)


def typecheck(expr: Expr) -> Type:
    """Check *expr* in an empty environment and return its type."""
    return Checker().check(expr)
