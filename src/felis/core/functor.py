"""Functor, Apply and Applicative - mapping over a type constructor.

Python has no higher-kinded types, so a value "of shape F" is typed as
``Any`` below. Instances receive and return such values explicitly::

    F = Functor.of(Option)
    F.map(Some(1), lambda a: a + 1)  # Some(2)

Laws:

1. Identity: map(fa, identity) == fa
2. Composition: map(map(fa, f), g) == map(fa, lambda a: g(f(a)))
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from felis.kernel.typeclass import TypeClass

A = TypeVar("A")
B = TypeVar("B")
Z = TypeVar("Z")


class Functor(TypeClass):
    """Map a function over the values held by a shape, keeping the shape."""

    @abstractmethod
    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Apply ``f`` to every value inside ``fa``."""

    def lift(self, f: Callable[[A], B]) -> Callable[[Any], Any]:
        """Turn ``A -> B`` into ``F[A] -> F[B]``."""
        return lambda fa: self.map(fa, f)

    def as_(self, fa: Any, b: B) -> Any:
        """Replace every value inside ``fa`` with ``b``."""
        return self.map(fa, lambda _: b)

    def void(self, fa: Any) -> Any:
        return self.as_(fa, ())

    def fproduct(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Pair each value with the result of applying ``f`` to it."""
        return self.map(fa, lambda a: (a, f(a)))

    def tuple_left(self, fa: Any, b: B) -> Any:
        return self.map(fa, lambda a: (b, a))

    def tuple_right(self, fa: Any, b: B) -> Any:
        return self.map(fa, lambda a: (a, b))


class Apply(Functor):
    """Functor that can apply a wrapped function to a wrapped value.

    Instances without ``flat_map`` (e.g. error-accumulating validations)
    must supply ``ap`` themselves.
    """

    @abstractmethod
    def ap(self, ff: Any, fa: Any) -> Any:
        """Apply the functions in ``ff`` to the values in ``fa``."""

    def product(self, fa: Any, fb: Any) -> Any:
        return self.ap(self.map(fa, lambda a: lambda b: (a, b)), fb)

    def map2(self, fa: Any, fb: Any, f: Callable[[A, B], Z]) -> Any:
        return self.map(self.product(fa, fb), lambda ab: f(ab[0], ab[1]))

    def ap2(self, ff: Any, fa: Any, fb: Any) -> Any:
        """Apply wrapped two-argument functions to two wrapped values."""
        return self.map(
            self.product(fa, self.product(fb, ff)),
            lambda t: t[1][1](t[0], t[1][0]),
        )

    def product_r(self, fa: Any, fb: Any) -> Any:
        """Compose both, keeping only the values of ``fb``."""
        return self.map2(fa, fb, lambda _, b: b)

    def product_l(self, fa: Any, fb: Any) -> Any:
        """Compose both, keeping only the values of ``fa``."""
        return self.map2(fa, fb, lambda a, _: a)


class Applicative(Apply):
    """Apply with ``pure``: lift a plain value into the shape."""

    @abstractmethod
    def pure(self, a: A) -> Any:
        """Wrap ``a`` in the minimal shape."""

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.ap(self.pure(f), fa)

    def unit(self) -> Any:
        return self.pure(())
