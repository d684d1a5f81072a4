"""felis - type classes for Python.

Algebras over a single type (Semigroup, Monoid, Group), capabilities over
shapes (Functor up to Monad, CoflatMap and Comonad), and a registry that
resolves the canonical instance of a capability for a type key.
"""

from felis.core import Applicative, Apply, CoflatMap, Comonad, FlatMap, Functor, Monad
from felis.data import (
    NOTHING,
    Either,
    Eval,
    Id,
    Left,
    NonEmptyList,
    Nothing,
    Option,
    Right,
    Some,
)
from felis.data.cokleisli import Cokleisli
from felis.data.either_k import EitherK
from felis.data.option_t import OptionT
from felis.instances.algebra import Int32
from felis.kernel import (
    INT_MAX,
    INT_MIN,
    AmbiguousInstanceError,
    Comparison,
    Group,
    InstanceError,
    Monoid,
    NoInstanceError,
    Semigroup,
    TypeClass,
)
from felis.registry import Registry, default_registry, given

__all__ = [
    # Kernel
    "TypeClass",
    "Semigroup",
    "Monoid",
    "Group",
    "Comparison",
    "INT_MIN",
    "INT_MAX",
    "Int32",
    # Core
    "Functor",
    "Apply",
    "Applicative",
    "FlatMap",
    "Monad",
    "CoflatMap",
    "Comonad",
    # Data
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "Either",
    "Left",
    "Right",
    "Eval",
    "NonEmptyList",
    "Id",
    "OptionT",
    "EitherK",
    "Cokleisli",
    # Resolution
    "Registry",
    "default_registry",
    "given",
    "InstanceError",
    "NoInstanceError",
    "AmbiguousInstanceError",
]
