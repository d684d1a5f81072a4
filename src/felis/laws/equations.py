"""Law equations for each capability.

Each method returns an ``IsEq`` for concrete sample inputs; a law
holds for an instance when every sample produces equal sides.
Generating the samples is left to the caller (see ``discipline``).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

from felis.core.coflat_map import CoflatMap, Comonad
from felis.core.flat_map import FlatMap, Monad
from felis.core.functor import Functor
from felis.data.either import Left, Right
from felis.kernel.semigroup import Group, Monoid, Semigroup

A = TypeVar("A")
T = TypeVar("T")


class LawViolation(AssertionError):
    """Both sides of a law differ for some input."""

    def __init__(self, message: str, lhs: Any, rhs: Any) -> None:
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(message)


@dataclass(frozen=True)
class IsEq(Generic[T]):
    """Two expressions that a law says are equal."""

    lhs: T
    rhs: T

    @property
    def holds(self) -> bool:
        return bool(self.lhs == self.rhs)

    def check(self) -> None:
        if not self.holds:
            raise LawViolation(f"{self.lhs!r} != {self.rhs!r}", self.lhs, self.rhs)


def _identity(a: A) -> A:
    return a


@dataclass(frozen=True)
class SemigroupLaws(Generic[A]):
    instance: Semigroup[A]

    def associativity(self, x: A, y: A, z: A) -> IsEq[A]:
        s = self.instance
        return IsEq(s.combine(s.combine(x, y), z), s.combine(x, s.combine(y, z)))

    def repeat_1(self, a: A) -> IsEq[A]:
        return IsEq(self.instance.combine_n(a, 1), a)

    def repeat_2(self, a: A) -> IsEq[A]:
        return IsEq(self.instance.combine_n(a, 2), self.instance.combine(a, a))

    def repeat_n(self, a: A, n: int) -> IsEq[A]:
        """Doubling gives the same result as combining one at a time."""
        naive = reduce(self.instance.combine, [a] * (n - 1), a)
        return IsEq(self.instance.combine_n(a, n), naive)

    def combine_all_option(self, values: Sequence[A]) -> IsEq[A | None]:
        expected = reduce(self.instance.combine, values) if values else None
        return IsEq(self.instance.combine_all_option(values), expected)

    def reverse_reverses(self, x: A, y: A) -> IsEq[A]:
        return IsEq(self.instance.combine(x, y), self.instance.reverse().combine(y, x))


@dataclass(frozen=True)
class MonoidLaws(SemigroupLaws[A]):
    instance: Monoid[A]

    def left_identity(self, a: A) -> IsEq[A]:
        return IsEq(self.instance.combine(self.instance.empty, a), a)

    def right_identity(self, a: A) -> IsEq[A]:
        return IsEq(self.instance.combine(a, self.instance.empty), a)

    def repeat_0(self, a: A) -> IsEq[A]:
        return IsEq(self.instance.combine_n(a, 0), self.instance.empty)

    def collect_0(self) -> IsEq[A]:
        return IsEq(self.instance.combine_all([]), self.instance.empty)

    def combine_all(self, values: Sequence[A]) -> IsEq[A]:
        m = self.instance
        return IsEq(m.combine_all(values), reduce(m.combine, values, m.empty))

    def is_id(self, a: A) -> IsEq[bool]:
        return IsEq(self.instance.is_empty(a), a == self.instance.empty)


@dataclass(frozen=True)
class GroupLaws(MonoidLaws[A]):
    instance: Group[A]

    def left_inverse(self, a: A) -> IsEq[A]:
        g = self.instance
        return IsEq(g.combine(g.inverse(a), a), g.empty)

    def right_inverse(self, a: A) -> IsEq[A]:
        g = self.instance
        return IsEq(g.combine(a, g.inverse(a)), g.empty)

    def consistent_inverse(self, x: A, y: A) -> IsEq[A]:
        g = self.instance
        return IsEq(g.remove(x, y), g.combine(x, g.inverse(y)))

    def negative_repeat(self, a: A, n: int) -> IsEq[A]:
        """For n > 0, combining -n times is combining the inverse n times."""
        g = self.instance
        return IsEq(g.combine_n(a, -n), g.combine_n(g.inverse(a), n))


@dataclass(frozen=True)
class FunctorLaws:
    instance: Functor

    def covariant_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.instance.map(fa, _identity), fa)

    def covariant_composition(self, fa: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.map(F.map(fa, f), g), F.map(fa, lambda a: g(f(a))))


@dataclass(frozen=True)
class FlatMapLaws(FunctorLaws):
    instance: FlatMap

    def flat_map_associativity(self, fa: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> IsEq[Any]:
        F = self.instance
        return IsEq(
            F.flat_map(F.flat_map(fa, f), g),
            F.flat_map(fa, lambda a: F.flat_map(f(a), g)),
        )

    def flat_map_consistent_apply(self, fa: Any, fab: Any) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.ap(fab, fa), F.flat_map(fab, lambda f: F.map(fa, f)))

    def mproduct_consistency(self, fa: Any, f: Callable[[Any], Any]) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.mproduct(fa, f), F.flat_map(fa, lambda a: F.map(f(a), lambda b: (a, b))))

    def tail_rec_m_consistent_flat_map(self, a: Any, f: Callable[[Any], Any]) -> IsEq[Any]:
        """One extra bounce of ``tail_rec_m`` equals one extra ``flat_map``."""
        F = self.instance

        def bounce(n: int) -> Any:
            def step(state: tuple[Any, int]) -> Any:
                seed, remaining = state
                if remaining > 0:
                    return F.map(f(seed), lambda next_seed: Left((next_seed, remaining - 1)))
                return F.map(f(seed), Right)

            return F.tail_rec_m((a, n), step)

        return IsEq(bounce(1), F.flat_map(bounce(0), f))


@dataclass(frozen=True)
class MonadLaws(FlatMapLaws):
    instance: Monad

    def left_identity(self, a: Any, f: Callable[[Any], Any]) -> IsEq[Any]:
        return IsEq(self.instance.flat_map(self.instance.pure(a), f), f(a))

    def right_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.instance.flat_map(fa, self.instance.pure), fa)

    def map_flat_map_coherence(self, fa: Any, f: Callable[[Any], Any]) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.flat_map(fa, lambda a: F.pure(f(a))), F.map(fa, f))


@dataclass(frozen=True)
class CoflatMapLaws(FunctorLaws):
    instance: CoflatMap

    def coflat_map_associativity(self, fa: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> IsEq[Any]:
        F = self.instance
        return IsEq(
            F.coflat_map(F.coflat_map(fa, f), g),
            F.coflat_map(fa, lambda x: g(F.coflat_map(x, f))),
        )

    def coflatten_through_map(self, fa: Any) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.coflatten(F.coflatten(fa)), F.map(F.coflatten(fa), F.coflatten))

    def coflat_map_coherence(self, fa: Any, f: Callable[[Any], Any]) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.coflat_map(fa, f), F.map(F.coflatten(fa), f))


@dataclass(frozen=True)
class ComonadLaws(CoflatMapLaws):
    instance: Comonad

    def extract_coflatten_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.instance.extract(self.instance.coflatten(fa)), fa)

    def map_coflatten_identity(self, fa: Any) -> IsEq[Any]:
        F = self.instance
        return IsEq(F.map(F.coflatten(fa), F.extract), fa)

    def coflat_map_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.instance.coflat_map(fa, self.instance.extract), fa)

    def comonad_right_identity(self, fa: Any, f: Callable[[Any], Any]) -> IsEq[Any]:
        return IsEq(self.instance.extract(self.instance.coflat_map(fa, f)), f(fa))


def tail_rec_m_stack_safety(monad: Monad, iterations: int) -> IsEq[Any]:
    """Count to ``iterations`` through ``tail_rec_m``; must not exhaust the stack."""

    def step(i: int) -> Any:
        if i < iterations:
            return monad.pure(Left(i + 1))
        return monad.pure(Right(i))

    return IsEq(monad.tail_rec_m(0, step), monad.pure(iterations))
