"""Monad for Python lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from felis.core.flat_map import Monad
from felis.data.either import Right, ensure_either
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")

_EXHAUSTED: Any = object()


def tail_rec_iterable(a: A, f: Callable[[A], Iterable[Any]]) -> Iterator[Any]:
    """Depth-first ``tail_rec_m`` for sequence-like shapes.

    Pending branches live in an explicit stack of iterators, so results
    come out in the same order nested ``flat_map`` calls would give.
    """
    stack: list[Iterator[Any]] = [iter(f(a))]
    while stack:
        step = next(stack[-1], _EXHAUSTED)
        if step is _EXHAUSTED:
            stack.pop()
            continue
        step = ensure_either(step)
        if isinstance(step, Right):
            yield step.value
        else:
            stack.append(iter(f(step.value)))


@dataclass(frozen=True)
class ListInstance(Monad):
    def pure(self, a: A) -> list[A]:
        return [a]

    def map(self, fa: list[A], f: Callable[[A], B]) -> list[B]:
        return [f(a) for a in fa]

    def flat_map(self, fa: list[A], f: Callable[[A], list[B]]) -> list[B]:
        return [b for a in fa for b in f(a)]

    def tail_rec_m(self, a: A, f: Callable[[A], list[Any]]) -> list[B]:
        return list(tail_rec_iterable(a, f))


LIST_INSTANCE = ListInstance()


def install(registry: Registry) -> None:
    registry.register(Monad, list, LIST_INSTANCE)
