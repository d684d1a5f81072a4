"""CoflatMap and Comonad - the duals of FlatMap and Monad.

Laws:

1. extract(coflatten(fa)) == fa
2. map(coflatten(fa), extract) == fa
3. coflat_map(fa, extract) == fa
4. extract(coflat_map(fa, f)) == f(fa)
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from felis.core.functor import Functor

A = TypeVar("A")
B = TypeVar("B")


class CoflatMap(Functor):
    @abstractmethod
    def coflat_map(self, fa: Any, f: Callable[[Any], B]) -> Any:
        """Apply ``f`` to the whole context at every position of ``fa``."""

    def coflatten(self, fa: Any) -> Any:
        """Add a layer: every position holds the context seen from there."""
        return self.coflat_map(fa, lambda context: context)


class Comonad(CoflatMap):
    @abstractmethod
    def extract(self, fa: Any) -> Any:
        """Project the focused value out of ``fa``."""
