"""Binding environment with lexical scoping for the tyck checker."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from tyck.types import Type


class Scope:
    """A single set of bindings pushed together."""

    def __init__(self, bindings: Iterable[tuple[str, Type]] = ()) -> None:
        self._bindings: dict[str, Type] = {}
        for name, ty in bindings:
            # later duplicates shadow earlier ones
            self._bindings[name] = ty

    def lookup(self, name: str) -> Type | None:
        return self._bindings.get(name)

    def names(self) -> list[str]:
        return list(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        inner = ", ".join(f"{n}: {t}" for n, t in self._bindings.items())
        return f"Scope({inner})"


class Environment:
    """Stack of scopes mapping identifiers to types.

    Lookups resolve to the most recently pushed binding.  Scopes are meant
    to be entered through :meth:`scope` or :meth:`with_bindings`, which
    remove exactly the scope they pushed on every exit path.
    """

    def __init__(self) -> None:
        self._scope_stack: list[Scope] = []

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    @property
    def depth(self) -> int:
        return len(self._scope_stack)

    def push_scope(self, bindings: Iterable[tuple[str, Type]] = ()) -> Scope:
        scope = Scope(bindings)
        self._scope_stack.append(scope)
        return scope

    def pop_scope(self) -> Scope:
        if not self._scope_stack:
            raise RuntimeError("cannot pop scope of an empty environment")
        return self._scope_stack.pop()

    def lookup(self, name: str) -> Type | None:
        """Look up *name*, innermost scope first."""
        for scope in reversed(self._scope_stack):
            ty = scope.lookup(name)
            if ty is not None:
                return ty
        return None

    def names(self) -> list[str]:
        """All visible identifiers, innermost first."""
        seen: dict[str, None] = {}
        for scope in reversed(self._scope_stack):
            for name in scope.names():
                seen.setdefault(name, None)
        return list(seen)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    @contextmanager
    def scope(self, bindings: Iterable[tuple[str, Type]]) -> Iterator[Environment]:
        """Push *bindings* as one scope for the duration of a ``with`` block."""
        self.push_scope(bindings)
        try:
            yield self
        finally:
            self.pop_scope()

    def with_bindings(
        self,
        bindings: Iterable[tuple[str, Type]],
        body: Callable[[Environment], Type],
    ) -> Type:
        """Run *body* with *bindings* in scope; the scope is always removed."""
        with self.scope(bindings) as env:
            return body(env)
