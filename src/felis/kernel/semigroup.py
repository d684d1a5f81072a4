"""Semigroup, Monoid and Group - combination over a single type.

Laws (checked by ``felis.laws``, never at runtime):

1. Associativity: combine(combine(a, b), c) == combine(a, combine(b, c))
2. Identity: combine(empty, a) == a == combine(a, empty)
3. Inverse: combine(a, inverse(a)) == empty == combine(inverse(a), a)
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Generic, TypeVar

from felis.kernel.typeclass import TypeClass

A = TypeVar("A")

# Repetition counts are 32-bit signed integers.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Semigroup(TypeClass, Generic[A]):
    """An associative binary operation over ``A``."""

    @abstractmethod
    def combine(self, x: A, y: A) -> A:
        """Associative operation which combines two values."""

    def combine_n(self, a: A, n: int) -> A:
        """Return ``a`` combined with itself ``n`` times."""
        if n <= 0:
            raise ValueError("Repeated combining for semigroups must have n > 0")
        return self._repeated_combine_n(a, n)

    def _repeated_combine_n(self, a: A, n: int) -> A:
        # Doubling: O(log n) calls to combine. Requires n >= 1.
        if n == 1:
            return a
        base, k, extra = a, n - 1, a
        while k != 1:
            if k & 1:
                extra = self.combine(base, extra)
            base = self.combine(base, base)
            k >>= 1
        return self.combine(base, extra)

    def combine_all_option(self, values: Iterable[A]) -> A | None:
        """Combine every value left to right, or ``None`` when there are none."""
        iterator = iter(values)
        sentinel = object()
        first = next(iterator, sentinel)
        if first is sentinel:
            return None
        return reduce(self.combine, iterator, first)  # type: ignore[arg-type]

    def reverse(self) -> Semigroup[A]:
        """Semigroup with the arguments of ``combine`` flipped."""
        return ReversedSemigroup(self)


class Monoid(Semigroup[A]):
    """A semigroup with an identity element."""

    @property
    @abstractmethod
    def empty(self) -> A:
        """Identity element for ``combine``."""

    def is_empty(self, a: A) -> bool:
        return a == self.empty

    def combine_n(self, a: A, n: int) -> A:
        if n < 0:
            raise ValueError("Repeated combining for monoids must have n >= 0")
        if n == 0:
            return self.empty
        return self._repeated_combine_n(a, n)

    def combine_all(self, values: Iterable[A]) -> A:
        return reduce(self.combine, values, self.empty)

    def reverse(self) -> Monoid[A]:
        return ReversedMonoid(self)


class Group(Monoid[A]):
    """A monoid where each element has an inverse."""

    @abstractmethod
    def inverse(self, a: A) -> A:
        """Find the inverse of ``a``."""

    def remove(self, a: A, b: A) -> A:
        """Remove the element ``b`` from ``a``; same as ``combine(a, inverse(b))``."""
        return self.combine(a, self.inverse(b))

    def combine_n(self, a: A, n: int) -> A:
        """Return ``a`` combined with itself ``n`` times.

        For negative ``n`` this is ``inverse(a)`` combined ``-n`` times.
        ``-INT_MIN`` falls outside the count range, so that count is halved
        by doubling the element first:

            combine_n(x, INT_MIN)
            == combine_n(combine(x, x), INT_MIN // 2)
            == combine_n(inverse(combine(x, x)), 2**30)
        """
        if n > 0:
            return self._repeated_combine_n(a, n)
        if n == 0:
            return self.empty
        if n == INT_MIN:
            return self._repeated_combine_n(self.inverse(self.combine(a, a)), -(INT_MIN // 2))
        return self._repeated_combine_n(self.inverse(a), -n)

    def reverse(self) -> Group[A]:
        return ReversedGroup(self)


@dataclass(frozen=True)
class ReversedSemigroup(Semigroup[A]):
    underlying: Semigroup[A]

    def combine(self, x: A, y: A) -> A:
        return self.underlying.combine(y, x)

    def reverse(self) -> Semigroup[A]:
        return self.underlying


@dataclass(frozen=True)
class ReversedMonoid(Monoid[A]):
    underlying: Monoid[A]

    @property
    def empty(self) -> A:
        return self.underlying.empty

    def combine(self, x: A, y: A) -> A:
        return self.underlying.combine(y, x)

    def reverse(self) -> Monoid[A]:
        return self.underlying


@dataclass(frozen=True)
class ReversedGroup(Group[A]):
    underlying: Group[A]

    @property
    def empty(self) -> A:
        return self.underlying.empty

    def combine(self, x: A, y: A) -> A:
        return self.underlying.combine(y, x)

    def inverse(self, a: A) -> A:
        return self.underlying.inverse(a)

    def reverse(self) -> Group[A]:
        return self.underlying
