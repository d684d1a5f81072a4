"""FlatMap and Monad - sequencing computations in a shape.

Laws:

1. Associativity: flat_map(flat_map(fa, f), g)
   == flat_map(fa, lambda a: flat_map(f(a), g))
2. Left identity: flat_map(pure(a), f) == f(a)
3. Right identity: flat_map(fa, pure) == fa

Every instance must implement ``tail_rec_m`` with an explicit loop so
that native stack usage stays bounded however many steps run. Steps
return ``Left(seed)`` to continue and ``Right(result)`` to stop.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from felis.core.functor import Applicative, Apply
from felis.data.either import Left, Right
from felis.data.eval import Eval

A = TypeVar("A")
B = TypeVar("B")
Z = TypeVar("Z")


class FlatMap(Apply):
    """Apply with ``flat_map``; ``ap`` and friends are derived from it.

    FlatMap is separate from Monad because some shapes can sequence but
    have no ``pure`` (a mapping keyed by an unknown key, say).
    """

    @abstractmethod
    def flat_map(self, fa: Any, f: Callable[[A], Any]) -> Any:
        """Feed the values of ``fa`` into ``f`` and join the results."""

    @abstractmethod
    def tail_rec_m(self, a: A, f: Callable[[A], Any]) -> Any:
        """Keep calling ``f`` until it yields a ``Right``, in constant stack."""

    def flatten(self, ffa: Any) -> Any:
        """Remove one layer of nesting; also called ``join``."""
        return self.flat_map(ffa, lambda fa: fa)

    def ap(self, ff: Any, fa: Any) -> Any:
        return self.flat_map(ff, lambda f: self.map(fa, f))

    def product(self, fa: Any, fb: Any) -> Any:
        return self.flat_map(fa, lambda a: self.map(fb, lambda b: (a, b)))

    def ap2(self, ff: Any, fa: Any, fb: Any) -> Any:
        return self.flat_map(
            fa, lambda a: self.flat_map(fb, lambda b: self.map(ff, lambda f: f(a, b)))
        )

    def map2(self, fa: Any, fb: Any, f: Callable[[A, B], Z]) -> Any:
        return self.flat_map(fa, lambda a: self.map(fb, lambda b: f(a, b)))

    def product_r(self, fa: Any, fb: Any) -> Any:
        return self.flat_map(fa, lambda _: fb)

    def product_l(self, fa: Any, fb: Any) -> Any:
        return self.map2(fa, fb, lambda a, _: a)

    def product_r_eval(self, fa: Any, fb: Eval[Any]) -> Any:
        """Like ``product_r``, but ``fb`` is only forced once ``fa`` has a value."""
        return self.flat_map(fa, lambda _: fb.value)

    def product_l_eval(self, fa: Any, fb: Eval[Any]) -> Any:
        """Like ``product_l``, but ``fb`` is only forced once ``fa`` has a value."""
        return self.flat_map(fa, lambda a: self.map(fb.value, lambda _: a))

    def mproduct(self, fa: Any, f: Callable[[A], Any]) -> Any:
        """Pair each value with each value of the computation it leads to."""
        return self.flat_map(fa, lambda a: self.map(f(a), lambda b: (a, b)))

    def if_m(
        self,
        fa: Any,
        if_true: Callable[[], Any],
        if_false: Callable[[], Any],
    ) -> Any:
        """``if`` lifted into the shape; only the chosen branch is built."""
        return self.flat_map(fa, lambda cond: if_true() if cond else if_false())

    def flat_tap(self, fa: Any, f: Callable[[A], Any]) -> Any:
        """Run ``f`` for its effect and keep the original values."""
        return self.flat_map(fa, lambda a: self.as_(f(a), a))


class Monad(FlatMap, Applicative):
    """FlatMap with ``pure``; ``map`` is derived from both."""

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.flat_map(fa, lambda a: self.pure(f(a)))

    def iterate_while_m(self, init: A, f: Callable[[A], Any], p: Callable[[A], bool]) -> Any:
        """Apply ``f`` starting from ``init`` while ``p`` holds for the latest value."""

        def step(a: A) -> Any:
            if p(a):
                return self.map(f(a), Left)
            return self.pure(Right(a))

        return self.tail_rec_m(init, step)

    def iterate_until_m(self, init: A, f: Callable[[A], Any], p: Callable[[A], bool]) -> Any:
        return self.iterate_while_m(init, f, lambda a: not p(a))

    def iterate_while(self, fa: Any, p: Callable[[A], bool]) -> Any:
        """Run ``fa`` repeatedly until its result fails ``p``."""
        return self.flat_map(fa, lambda a: self.iterate_while_m(a, lambda _: fa, p))

    def iterate_until(self, fa: Any, p: Callable[[A], bool]) -> Any:
        return self.flat_map(fa, lambda a: self.iterate_until_m(a, lambda _: fa, p))
