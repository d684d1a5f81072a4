"""Immutable lists with at least one element."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class NonEmptyList(Generic[A]):
    """A ``head`` followed by a possibly-empty ``tail``."""

    head: A
    tail: tuple[A, ...] = ()

    @staticmethod
    def of(head: A, *rest: A) -> NonEmptyList[A]:
        return NonEmptyList(head, tuple(rest))

    @staticmethod
    def from_iterable(values: Iterable[A]) -> NonEmptyList[A]:
        items = tuple(values)
        if not items:
            raise ValueError("NonEmptyList requires at least one element")
        return NonEmptyList(items[0], items[1:])

    def __iter__(self) -> Iterator[A]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def to_list(self) -> list[A]:
        return [self.head, *self.tail]

    def map(self, f: Callable[[A], B]) -> NonEmptyList[B]:
        return NonEmptyList(f(self.head), tuple(f(a) for a in self.tail))

    def flat_map(self, f: Callable[[A], NonEmptyList[B]]) -> NonEmptyList[B]:
        return NonEmptyList.from_iterable(b for a in self for b in f(a))

    def coflat_map(self, f: Callable[[NonEmptyList[A]], B]) -> NonEmptyList[B]:
        """Apply ``f`` to this list and to every non-empty suffix of it."""
        items = self.to_list()
        return NonEmptyList.from_iterable(
            f(NonEmptyList(items[i], tuple(items[i + 1:]))) for i in range(len(items))
        )

    def __repr__(self) -> str:
        return f"NonEmptyList({', '.join(repr(a) for a in self)})"
