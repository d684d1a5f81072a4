"""Monad and CoflatMap for ``Option``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from felis.core.coflat_map import CoflatMap
from felis.core.flat_map import Monad
from felis.data.either import Right, ensure_either
from felis.data.option import NOTHING, Option, Some
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class OptionInstance(Monad, CoflatMap):
    def pure(self, a: A) -> Option[A]:
        return Some(a)

    def map(self, fa: Option[A], f: Callable[[A], B]) -> Option[B]:
        return fa.map(f)

    def flat_map(self, fa: Option[A], f: Callable[[A], Option[B]]) -> Option[B]:
        return fa.flat_map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], Option[Any]]) -> Option[B]:
        current = a
        while True:
            result = f(current)
            if not isinstance(result, Some):
                return NOTHING
            step = ensure_either(result.value)
            if isinstance(step, Right):
                return Some(step.value)
            current = step.value

    def coflat_map(self, fa: Option[A], f: Callable[[Option[A]], B]) -> Option[B]:
        if isinstance(fa, Some):
            return Some(f(fa))
        return NOTHING


OPTION_INSTANCE = OptionInstance()


def install(registry: Registry) -> None:
    registry.register(Monad, Option, OPTION_INSTANCE)
    registry.register(CoflatMap, Option, OPTION_INSTANCE)
