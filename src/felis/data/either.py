"""Right-biased disjoint union, also the step result of ``tail_rec_m``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")
C = TypeVar("C")


class Either(Generic[L, R]):
    """``Left(value)`` or ``Right(value)``.

    Operations act on the ``Right`` side. In ``tail_rec_m`` a ``Left``
    means "continue with this seed" and a ``Right`` means "done".
    """

    __slots__ = ()

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    def fold(self, fl: Callable[[L], C], fr: Callable[[R], C]) -> C:
        if isinstance(self, Right):
            return fr(self.value)
        return fl(self.value)  # type: ignore[attr-defined]

    def map(self, f: Callable[[R], C]) -> Either[L, C]:
        if isinstance(self, Right):
            return Right(f(self.value))
        return self  # type: ignore[return-value]

    def left_map(self, f: Callable[[L], C]) -> Either[C, R]:
        if isinstance(self, Left):
            return Left(f(self.value))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[R], Either[L, C]]) -> Either[L, C]:
        if isinstance(self, Right):
            return f(self.value)
        return self  # type: ignore[return-value]

    def swap(self) -> Either[R, L]:
        if isinstance(self, Right):
            return Left(self.value)
        return Right(self.value)  # type: ignore[attr-defined]

    def get_or_else(self, default: C) -> R | C:
        if isinstance(self, Right):
            return self.value
        return default


@dataclass(frozen=True)
class Left(Either[L, Any]):
    value: L

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True)
class Right(Either[Any, R]):
    value: R

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


def ensure_either(step: Any) -> Either[Any, Any]:
    """Check that a ``tail_rec_m`` step produced an ``Either``."""
    if not isinstance(step, Either):
        raise TypeError(
            f"tail_rec_m step must produce Left or Right, got {type(step).__name__}"
        )
    return step
