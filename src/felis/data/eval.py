"""Deferred values with explicit evaluation strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")

_UNSET: Any = object()


class Eval(ABC, Generic[A]):
    """A value that may not have been computed yet.

    - ``Eval.now(a)``: already computed
    - ``Eval.later(thunk)``: computed on first access, then memoised
    - ``Eval.always(thunk)``: recomputed on every access

    ``map`` and ``flat_map`` build a ``FlatMapped`` chain that is forced
    in a loop. Two Evals are equal when their values are.
    """

    @property
    @abstractmethod
    def value(self) -> A:
        """Force the computation."""

    @staticmethod
    def now(value: A) -> Eval[A]:
        return Now(value)

    @staticmethod
    def later(thunk: Callable[[], A]) -> Eval[A]:
        return Later(thunk)

    @staticmethod
    def always(thunk: Callable[[], A]) -> Eval[A]:
        return Always(thunk)

    def map(self, f: Callable[[A], B]) -> Eval[B]:
        return FlatMapped(self, lambda a: Now(f(a)))

    def flat_map(self, f: Callable[[A], Eval[B]]) -> Eval[B]:
        return FlatMapped(self, f)

    def memoize(self) -> Eval[A]:
        return Later(lambda: self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Eval):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, eq=False)
class Now(Eval[A]):
    _value: A

    @property
    def value(self) -> A:
        return self._value

    def memoize(self) -> Eval[A]:
        return self

    def __repr__(self) -> str:
        return f"Now({self._value!r})"


class Later(Eval[A]):
    __slots__ = ("_thunk", "_value")

    def __init__(self, thunk: Callable[[], A]) -> None:
        self._thunk: Callable[[], A] | None = thunk
        self._value: A = _UNSET

    @property
    def value(self) -> A:
        if self._thunk is not None:
            self._value = self._thunk()
            # Drop the thunk so captured references can be collected.
            self._thunk = None
        return self._value

    @property
    def evaluated(self) -> bool:
        return self._thunk is None

    def memoize(self) -> Eval[A]:
        return self

    def __repr__(self) -> str:
        return f"Later({self._value!r})" if self.evaluated else "Later(<pending>)"


class Always(Eval[A]):
    __slots__ = ("_thunk",)

    def __init__(self, thunk: Callable[[], A]) -> None:
        self._thunk = thunk

    @property
    def value(self) -> A:
        return self._thunk()

    def __repr__(self) -> str:
        return "Always(<thunk>)"


class FlatMapped(Eval[B]):
    """``start`` followed by ``f``, built by ``map`` and ``flat_map``.

    Forcing walks the chain with a list of pending continuations, so
    arbitrarily long chains run in constant native stack. Not memoised;
    call ``memoize`` to cache the result.
    """

    __slots__ = ("start", "f")

    def __init__(self, start: Eval[Any], f: Callable[[Any], Eval[B]]) -> None:
        self.start = start
        self.f = f

    @property
    def value(self) -> B:
        continuations: list[Callable[[Any], Eval[Any]]] = []
        current: Eval[Any] = self
        while True:
            if isinstance(current, FlatMapped):
                continuations.append(current.f)
                current = current.start
                continue
            result = current.value
            if not continuations:
                return result
            current = continuations.pop()(result)

    def __repr__(self) -> str:
        return "FlatMapped(<pending>)"
