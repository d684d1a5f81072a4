"""``EitherK`` - a value of shape ``F`` or of shape ``G`` over the same element."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from felis.core.coflat_map import CoflatMap, Comonad
from felis.core.functor import Functor
from felis.data.either import Either, Left, Right
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
G = TypeVar("G")


@dataclass(frozen=True)
class EitherK(Generic[F, G]):
    """``F`` on the left and ``G`` on the right of an ``Either``.

    ``run`` is the underlying ``Either[F[A], G[A]]``.
    """

    run: Either[Any, Any]

    @staticmethod
    def left_c(fa: Any) -> EitherK[Any, Any]:
        return EitherK(Left(fa))

    @staticmethod
    def right_c(ga: Any) -> EitherK[Any, Any]:
        return EitherK(Right(ga))

    @property
    def is_left(self) -> bool:
        return self.run.is_left

    @property
    def is_right(self) -> bool:
        return self.run.is_right

    def swap(self) -> EitherK[Any, Any]:
        return EitherK(self.run.swap())

    def map(self, f: Callable[[A], B], left: Functor, right: Functor) -> EitherK[Any, Any]:
        return EitherK(
            self.run.fold(
                lambda fa: Left(left.map(fa, f)),
                lambda ga: Right(right.map(ga, f)),
            )
        )

    def map_k(self, g: Callable[[Any], Any]) -> EitherK[Any, Any]:
        """Modify the right side context with the transformation ``g``."""
        return EitherK(self.run.map(g))

    def coflat_map(
        self,
        f: Callable[[EitherK[Any, Any]], B],
        left: CoflatMap,
        right: CoflatMap,
    ) -> EitherK[Any, Any]:
        return EitherK(
            self.run.fold(
                lambda fa: Left(left.coflat_map(fa, lambda x: f(EitherK.left_c(x)))),
                lambda ga: Right(right.coflat_map(ga, lambda x: f(EitherK.right_c(x)))),
            )
        )

    def coflatten(self, left: CoflatMap, right: CoflatMap) -> EitherK[Any, Any]:
        return EitherK(
            self.run.fold(
                lambda fa: Left(left.coflat_map(fa, EitherK.left_c)),
                lambda ga: Right(right.coflat_map(ga, EitherK.right_c)),
            )
        )

    def extract(self, left: Comonad, right: Comonad) -> Any:
        return self.run.fold(left.extract, right.extract)

    def fold(self, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Any:
        """Collapse into a single shape with one transformation per side."""
        return self.run.fold(f, g)


@dataclass(frozen=True)
class EitherKFunctor(Functor):
    left: Functor
    right: Functor

    def map(self, fa: EitherK[Any, Any], f: Callable[[A], B]) -> EitherK[Any, Any]:
        return fa.map(f, self.left, self.right)


@dataclass(frozen=True)
class EitherKCoflatMap(CoflatMap):
    left: CoflatMap
    right: CoflatMap

    def map(self, fa: EitherK[Any, Any], f: Callable[[A], B]) -> EitherK[Any, Any]:
        return fa.map(f, self.left, self.right)

    def coflat_map(
        self, fa: EitherK[Any, Any], f: Callable[[EitherK[Any, Any]], B]
    ) -> EitherK[Any, Any]:
        return fa.coflat_map(f, self.left, self.right)

    def coflatten(self, fa: EitherK[Any, Any]) -> EitherK[Any, Any]:
        return fa.coflatten(self.left, self.right)


@dataclass(frozen=True)
class EitherKComonad(EitherKCoflatMap, Comonad):
    left: Comonad
    right: Comonad

    def extract(self, fa: EitherK[Any, Any]) -> Any:
        return fa.extract(self.left, self.right)


def install(registry: Registry) -> None:
    """Register the EitherK rules; keys are ``EitherK, F, G``."""

    @registry.derive(Comonad, EitherK, priority=2)
    def _comonad(reg: Registry, left: Any, right: Any) -> EitherKComonad:
        return EitherKComonad(reg.resolve(Comonad, left), reg.resolve(Comonad, right))

    @registry.derive(CoflatMap, EitherK, priority=1)
    def _coflat_map(reg: Registry, left: Any, right: Any) -> EitherKCoflatMap:
        return EitherKCoflatMap(reg.resolve(CoflatMap, left), reg.resolve(CoflatMap, right))

    @registry.derive(Functor, EitherK, priority=0)
    def _functor(reg: Registry, left: Any, right: Any) -> EitherKFunctor:
        return EitherKFunctor(reg.resolve(Functor, left), reg.resolve(Functor, right))
