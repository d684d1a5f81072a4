"""Built-in instances and derivation rules.

Each module exposes ``install(registry)``; ``install`` below wires all of
them into one registry.
"""

from felis.data import cokleisli, either_k, option_t
from felis.instances import algebra, either, evaluation, identity, lists, nonempty, option
from felis.registry import Registry

_MODULES = (
    algebra,
    option,
    either,
    lists,
    evaluation,
    identity,
    nonempty,
    option_t,
    either_k,
    cokleisli,
)


def install(registry: Registry) -> None:
    """Register every built-in instance and rule into ``registry``."""
    for module in _MODULES:
        module.install(registry)


__all__ = ["install"]
