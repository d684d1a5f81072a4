"""``OptionT`` - the monad transformer for ``Option``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from felis.core.flat_map import Monad
from felis.core.functor import Applicative, Functor
from felis.data.either import Left, Right, ensure_either
from felis.data.option import NOTHING, Option, Some
from felis.kernel.semigroup import Monoid, Semigroup
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")


@dataclass(frozen=True)
class OptionT(Generic[F]):
    """A light wrapper on an ``F[Option[A]]``.

    Handles both layers at once: ``map`` reaches through ``F`` and the
    ``Option``, ``flat_map`` short-circuits on ``Nothing`` inside ``F``.
    The instances for ``F`` are passed explicitly::

        ot = OptionT([Some(1), NOTHING])
        ot.map(lambda a: a + 1, Functor.of(list))  # OptionT([Some(2), Nothing])

    The type parameter is the shape ``F``; the element type is not tracked.
    """

    value: Any

    @staticmethod
    def pure(a: A, applicative: Applicative) -> OptionT[Any]:
        return OptionT(applicative.pure(Some(a)))

    @staticmethod
    def some(a: A, applicative: Applicative) -> OptionT[Any]:
        return OptionT.pure(a, applicative)

    @staticmethod
    def none(applicative: Applicative) -> OptionT[Any]:
        return OptionT(applicative.pure(NOTHING))

    @staticmethod
    def from_option(option: Option[A], applicative: Applicative) -> OptionT[Any]:
        return OptionT(applicative.pure(option))

    @staticmethod
    def lift_f(fa: Any, functor: Functor) -> OptionT[Any]:
        """Lift ``F[A]`` into ``OptionT[F, A]``, every value becoming ``Some``."""
        return OptionT(functor.map(fa, Some))

    def fold(self, default: B, f: Callable[[A], B], functor: Functor) -> Any:
        return functor.map(self.value, lambda option: option.fold(lambda: default, f))

    def cata(self, default: B, f: Callable[[A], B], functor: Functor) -> Any:
        return self.fold(default, f, functor)

    def map(self, f: Callable[[A], B], functor: Functor) -> OptionT[Any]:
        return OptionT(functor.map(self.value, lambda option: option.map(f)))

    def transform(self, f: Callable[[Option[A]], Option[B]], functor: Functor) -> OptionT[Any]:
        return OptionT(functor.map(self.value, f))

    def subflat_map(self, f: Callable[[A], Option[B]], functor: Functor) -> OptionT[Any]:
        return self.transform(lambda option: option.flat_map(f), functor)

    def map_filter(self, f: Callable[[A], Option[B]], functor: Functor) -> OptionT[Any]:
        return self.subflat_map(f, functor)

    def flat_map(self, f: Callable[[A], OptionT[Any]], monad: Monad) -> OptionT[Any]:
        return self.flat_map_f(lambda a: f(a).value, monad)

    def flat_map_f(self, f: Callable[[A], Any], monad: Monad) -> OptionT[Any]:
        """Like ``flat_map`` for a function returning a bare ``F[Option[B]]``."""
        return OptionT(
            monad.flat_map(self.value, lambda option: option.fold(lambda: monad.pure(NOTHING), f))
        )

    def semiflat_map(self, f: Callable[[A], Any], monad: Monad) -> OptionT[Any]:
        """Like ``flat_map`` for a function returning ``F[B]``."""
        return self.flat_map(lambda a: OptionT.lift_f(f(a), monad), monad)

    def flat_transform(self, f: Callable[[Option[A]], Any], monad: Monad) -> OptionT[Any]:
        return OptionT(monad.flat_map(self.value, f))

    def get_or_else(self, default: B, functor: Functor) -> Any:
        return functor.map(self.value, lambda option: option.get_or_else(default))

    def get_or_else_f(self, default: Any, monad: Monad) -> Any:
        return monad.flat_map(self.value, lambda option: option.fold(lambda: default, monad.pure))

    def exists(self, p: Callable[[A], bool], functor: Functor) -> Any:
        return functor.map(self.value, lambda option: option.fold(lambda: False, p))

    def forall(self, p: Callable[[A], bool], functor: Functor) -> Any:
        return functor.map(self.value, lambda option: option.fold(lambda: True, p))

    def filter(self, p: Callable[[A], bool], functor: Functor) -> OptionT[Any]:
        return self.transform(lambda option: option.filter(p), functor)

    def filter_not(self, p: Callable[[A], bool], functor: Functor) -> OptionT[Any]:
        return self.filter(lambda a: not p(a), functor)

    def is_defined(self, functor: Functor) -> Any:
        return functor.map(self.value, lambda option: option.is_defined)

    def is_empty(self, functor: Functor) -> Any:
        return functor.map(self.value, lambda option: option.is_empty)

    def or_else(self, default: OptionT[Any], monad: Monad) -> OptionT[Any]:
        return self.or_else_f(default.value, monad)

    def or_else_f(self, default: Any, monad: Monad) -> OptionT[Any]:
        return OptionT(
            monad.flat_map(
                self.value,
                lambda option: monad.pure(option) if option.is_defined else default,
            )
        )

    def to_right(self, left: Any, functor: Functor) -> Any:
        """``F[Either]`` with ``Nothing`` turned into ``Left(left)``."""
        return self.cata(Left(left), Right, functor)

    def to_left(self, right: Any, functor: Functor) -> Any:
        return self.cata(Right(right), Left, functor)


@dataclass(frozen=True)
class OptionTFunctor(Functor):
    inner: Functor

    def map(self, fa: OptionT[Any], f: Callable[[A], B]) -> OptionT[Any]:
        return fa.map(f, self.inner)


@dataclass(frozen=True)
class OptionTMonad(Monad):
    inner: Monad

    def pure(self, a: A) -> OptionT[Any]:
        return OptionT.pure(a, self.inner)

    def map(self, fa: OptionT[Any], f: Callable[[A], B]) -> OptionT[Any]:
        return fa.map(f, self.inner)

    def flat_map(self, fa: OptionT[Any], f: Callable[[A], OptionT[Any]]) -> OptionT[Any]:
        return fa.flat_map(f, self.inner)

    def tail_rec_m(self, a: A, f: Callable[[A], OptionT[Any]]) -> OptionT[Any]:
        # Nothing stops the loop with Nothing; Some(Left) continues; Some(Right) stops.
        def step(seed: A) -> Any:
            return self.inner.map(
                f(seed).value,
                lambda option: option.fold(
                    lambda: Right(NOTHING),
                    lambda either: ensure_either(either).map(Some),
                ),
            )

        return OptionT(self.inner.tail_rec_m(a, step))


@dataclass(frozen=True)
class OptionTSemigroup(Semigroup[OptionT[Any]]):
    inner: Semigroup[Any]

    def combine(self, x: OptionT[Any], y: OptionT[Any]) -> OptionT[Any]:
        return OptionT(self.inner.combine(x.value, y.value))


@dataclass(frozen=True)
class OptionTMonoid(Monoid[OptionT[Any]]):
    inner: Monoid[Any]

    @property
    def empty(self) -> OptionT[Any]:
        return OptionT(self.inner.empty)

    def combine(self, x: OptionT[Any], y: OptionT[Any]) -> OptionT[Any]:
        return OptionT(self.inner.combine(x.value, y.value))


def install(registry: Registry) -> None:
    """Register the OptionT rules.

    Keys are ``OptionT, F`` for the shape capabilities and
    ``OptionT, F[Option[A]]`` for the algebras.
    """

    @registry.derive(Monad, OptionT, priority=3)
    def _monad(reg: Registry, shape: Any) -> OptionTMonad:
        return OptionTMonad(reg.resolve(Monad, shape))

    @registry.derive(Functor, OptionT, priority=0)
    def _functor(reg: Registry, shape: Any) -> OptionTFunctor:
        return OptionTFunctor(reg.resolve(Functor, shape))

    @registry.derive(Monoid, OptionT, priority=3)
    def _monoid(reg: Registry, wrapped: Any) -> OptionTMonoid:
        return OptionTMonoid(reg.resolve(Monoid, wrapped))

    @registry.derive(Semigroup, OptionT, priority=1)
    def _semigroup(reg: Registry, wrapped: Any) -> OptionTSemigroup:
        return OptionTSemigroup(reg.resolve(Semigroup, wrapped))
