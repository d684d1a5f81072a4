"""Kernel layer - algebras over a single type."""

from felis.kernel.comparison import Comparison
from felis.kernel.errors import AmbiguousInstanceError, InstanceError, NoInstanceError
from felis.kernel.semigroup import INT_MAX, INT_MIN, Group, Monoid, Semigroup
from felis.kernel.typeclass import TypeClass

__all__ = [
    "TypeClass",
    "Semigroup",
    "Monoid",
    "Group",
    "INT_MIN",
    "INT_MAX",
    "Comparison",
    # Errors
    "InstanceError",
    "NoInstanceError",
    "AmbiguousInstanceError",
]
