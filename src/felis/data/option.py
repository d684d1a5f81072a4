"""Optional values that nest, unlike ``None``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Option(Generic[A]):
    """Either ``Some(value)`` or ``Nothing()``.

    Use ``Some(value)`` / ``NOTHING`` to build values and pattern match on
    the two dataclasses to take them apart.
    """

    __slots__ = ()

    @staticmethod
    def from_optional(value: A | None) -> Option[A]:
        """Lift a possibly-``None`` value; ``None`` becomes ``Nothing``."""
        return NOTHING if value is None else Some(value)

    @property
    def is_defined(self) -> bool:
        return isinstance(self, Some)

    @property
    def is_empty(self) -> bool:
        return not self.is_defined

    def fold(self, if_empty: Callable[[], B], f: Callable[[A], B]) -> B:
        if isinstance(self, Some):
            return f(self.value)
        return if_empty()

    def map(self, f: Callable[[A], B]) -> Option[B]:
        if isinstance(self, Some):
            return Some(f(self.value))
        return NOTHING

    def flat_map(self, f: Callable[[A], Option[B]]) -> Option[B]:
        if isinstance(self, Some):
            return f(self.value)
        return NOTHING

    def filter(self, p: Callable[[A], bool]) -> Option[A]:
        if isinstance(self, Some) and p(self.value):
            return self
        return NOTHING

    def get_or_else(self, default: B) -> A | B:
        if isinstance(self, Some):
            return self.value
        return default

    def or_else(self, alternative: Option[A]) -> Option[A]:
        return self if self.is_defined else alternative

    def to_optional(self) -> A | None:
        return self.get_or_else(None)


@dataclass(frozen=True)
class Some(Option[A]):
    value: A

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Option[Any]):
    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Option[Any] = Nothing()
