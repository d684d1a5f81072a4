"""Monad and Comonad for ``Id``, where a value of the shape is the value itself."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from felis.core.coflat_map import Comonad
from felis.core.flat_map import Monad
from felis.data.either import Right, ensure_either
from felis.data.identity import Id
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class IdInstance(Monad, Comonad):
    def pure(self, a: A) -> A:
        return a

    def map(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def flat_map(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def tail_rec_m(self, a: A, f: Callable[[A], Any]) -> B:
        current = a
        while True:
            step = ensure_either(f(current))
            if isinstance(step, Right):
                return step.value
            current = step.value

    def coflat_map(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def extract(self, fa: A) -> A:
        return fa


ID_INSTANCE = IdInstance()


def install(registry: Registry) -> None:
    registry.register(Monad, Id, ID_INSTANCE)
    registry.register(Comonad, Id, ID_INSTANCE)
