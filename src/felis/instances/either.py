"""Right-biased Monad for ``Either``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from felis.core.flat_map import Monad
from felis.data.either import Either, Left, Right, ensure_either
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class EitherInstance(Monad):
    """Sequencing stops at the first ``Left``."""

    def pure(self, a: A) -> Either[Any, A]:
        return Right(a)

    def map(self, fa: Either[Any, A], f: Callable[[A], B]) -> Either[Any, B]:
        return fa.map(f)

    def flat_map(self, fa: Either[Any, A], f: Callable[[A], Either[Any, B]]) -> Either[Any, B]:
        return fa.flat_map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], Either[Any, Any]]) -> Either[Any, B]:
        current = a
        while True:
            result = f(current)
            if isinstance(result, Left):
                return result
            step = ensure_either(ensure_either(result).value)
            if isinstance(step, Right):
                return step
            current = step.value


EITHER_INSTANCE = EitherInstance()


def install(registry: Registry) -> None:
    registry.register(Monad, Either, EITHER_INSTANCE)
