"""Core layer - capabilities over type constructors."""

from felis.core.coflat_map import CoflatMap, Comonad
from felis.core.flat_map import FlatMap, Monad
from felis.core.functor import Applicative, Apply, Functor

__all__ = [
    "Functor",
    "Apply",
    "Applicative",
    "FlatMap",
    "Monad",
    "CoflatMap",
    "Comonad",
]
