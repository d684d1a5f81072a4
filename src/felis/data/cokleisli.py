"""``Cokleisli`` - functions out of a context, ``F[A] -> B``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from felis.core.coflat_map import CoflatMap, Comonad
from felis.core.flat_map import Monad
from felis.core.functor import Functor
from felis.data.either import Left, ensure_either
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
F = TypeVar("F")


@dataclass(frozen=True)
class Cokleisli(Generic[F, A]):
    """Wraps ``run: F[A] -> B``.

    Composition goes through ``coflat_map`` of ``F``: the second function
    sees the result of the first computed at every position.
    """

    run: Callable[[Any], Any]

    def __call__(self, fa: Any) -> Any:
        return self.run(fa)

    @staticmethod
    def pure(b: B) -> Cokleisli[Any, Any]:
        return Cokleisli(lambda _: b)

    @staticmethod
    def lift(f: Callable[[A], B], comonad: Comonad) -> Cokleisli[Any, A]:
        """Run ``f`` on the focused value."""
        return Cokleisli(lambda fa: f(comonad.extract(fa)))

    def dimap(self, f: Callable[[C], A], g: Callable[[B], D], functor: Functor) -> Cokleisli[Any, C]:
        return Cokleisli(lambda fc: g(self.run(functor.map(fc, f))))

    def lmap(self, f: Callable[[C], A], functor: Functor) -> Cokleisli[Any, C]:
        return Cokleisli(lambda fc: self.run(functor.map(fc, f)))

    def map(self, f: Callable[[B], C]) -> Cokleisli[Any, A]:
        return Cokleisli(lambda fa: f(self.run(fa)))

    def contramap_value(self, f: Callable[[Any], Any]) -> Cokleisli[Any, Any]:
        return Cokleisli(lambda fc: self.run(f(fc)))

    def flat_map(self, f: Callable[[B], Cokleisli[Any, A]]) -> Cokleisli[Any, A]:
        return Cokleisli(lambda fa: f(self.run(fa)).run(fa))

    def compose(self, other: Cokleisli[Any, C], coflat_map: CoflatMap) -> Cokleisli[Any, C]:
        """``self`` after ``other``."""
        return Cokleisli(lambda fc: self.run(coflat_map.coflat_map(fc, other.run)))

    def and_then(self, other: Cokleisli[Any, Any], coflat_map: CoflatMap) -> Cokleisli[Any, A]:
        return other.compose(self, coflat_map)

    def first(self, comonad: Comonad) -> Cokleisli[Any, tuple[A, Any]]:
        """Run on the first component of pairs, passing the focused second through."""
        return Cokleisli(
            lambda fac: (
                self.run(comonad.map(fac, lambda pair: pair[0])),
                comonad.extract(comonad.map(fac, lambda pair: pair[1])),
            )
        )

    def second(self, comonad: Comonad) -> Cokleisli[Any, tuple[Any, A]]:
        return Cokleisli(
            lambda fca: (
                comonad.extract(comonad.map(fca, lambda pair: pair[0])),
                self.run(comonad.map(fca, lambda pair: pair[1])),
            )
        )

    def split(self, other: Cokleisli[Any, C], functor: Functor) -> Cokleisli[Any, tuple[A, C]]:
        """Run both on pairs, one per component."""
        return Cokleisli(
            lambda fac: (
                self.run(functor.map(fac, lambda pair: pair[0])),
                other.run(functor.map(fac, lambda pair: pair[1])),
            )
        )


@dataclass(frozen=True)
class CokleisliMonad(Monad):
    """Monad over the result type of ``Cokleisli[F, A, *]``, for any ``F``."""

    def pure(self, b: B) -> Cokleisli[Any, Any]:
        return Cokleisli.pure(b)

    def map(self, fa: Cokleisli[Any, Any], f: Callable[[B], C]) -> Cokleisli[Any, Any]:
        return fa.map(f)

    def flat_map(
        self, fa: Cokleisli[Any, Any], f: Callable[[B], Cokleisli[Any, Any]]
    ) -> Cokleisli[Any, Any]:
        return fa.flat_map(f)

    def tail_rec_m(self, b: B, f: Callable[[B], Cokleisli[Any, Any]]) -> Cokleisli[Any, Any]:
        def run(fa: Any) -> Any:
            step = ensure_either(f(b).run(fa))
            while isinstance(step, Left):
                step = ensure_either(f(step.value).run(fa))
            return step.value

        return Cokleisli(run)


COKLEISLI_MONAD = CokleisliMonad()


def install(registry: Registry) -> None:
    """Register the Cokleisli monad; it needs nothing from ``F``."""

    @registry.derive(Monad, Cokleisli)
    def _monad(_reg: Registry, *_args: Any) -> CokleisliMonad:
        return COKLEISLI_MONAD
