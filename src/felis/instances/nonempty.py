"""Monad and Comonad for ``NonEmptyList``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from felis.core.coflat_map import Comonad
from felis.core.flat_map import Monad
from felis.data.nonempty import NonEmptyList
from felis.instances.lists import tail_rec_iterable
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class NonEmptyListInstance(Monad, Comonad):
    """The comonad focuses on the head; ``coflat_map`` walks the suffixes."""

    def pure(self, a: A) -> NonEmptyList[A]:
        return NonEmptyList(a)

    def map(self, fa: NonEmptyList[A], f: Callable[[A], B]) -> NonEmptyList[B]:
        return fa.map(f)

    def flat_map(
        self, fa: NonEmptyList[A], f: Callable[[A], NonEmptyList[B]]
    ) -> NonEmptyList[B]:
        return fa.flat_map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], NonEmptyList[Any]]) -> NonEmptyList[B]:
        return NonEmptyList.from_iterable(tail_rec_iterable(a, f))

    def coflat_map(
        self, fa: NonEmptyList[A], f: Callable[[NonEmptyList[A]], B]
    ) -> NonEmptyList[B]:
        return fa.coflat_map(f)

    def extract(self, fa: NonEmptyList[A]) -> A:
        return fa.head


NON_EMPTY_LIST_INSTANCE = NonEmptyListInstance()


def install(registry: Registry) -> None:
    registry.register(Monad, NonEmptyList, NON_EMPTY_LIST_INSTANCE)
    registry.register(Comonad, NonEmptyList, NON_EMPTY_LIST_INSTANCE)
