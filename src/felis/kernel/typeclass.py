"""Root of the capability hierarchy."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from felis.registry import Registry


class TypeClass(ABC):
    """A capability implemented per type rather than by subclassing that type.

    Instances are stateless values shared for the life of the process.
    Obtain the canonical one for a type with ``Capability.of(key)``::

        Monoid.of(int).combine_n(3, 4)  # 12
        Monad.of(OptionT, list)
    """

    @classmethod
    def of(cls, *key: Any, registry: Registry | None = None) -> Self:
        """Resolve the instance of this capability for ``key``."""
        from felis.registry import default_registry

        return (registry or default_registry()).resolve(cls, *key)
