"""Instance registry - maps (capability, type key) to the canonical instance.

A type key is either a typing alias (``tuple[int, str]``, ``Option[int]``)
or an origin followed by its arguments (``OptionT, list``). Lookups never
look at runtime values.

Precedence when several entries could answer a request:

1. Higher ``priority`` first (derivation tiers, most specific highest).
2. Then the deeper capability: a Monad entry answers a Functor request
   before an Apply or Functor entry for the same origin.
3. The first tier in which some entry succeeds wins. Two different
   instances from the same tier are ambiguous.

A derivation rule declines by letting the ``NoInstanceError`` of a
component lookup propagate. A rule whose signature does not fit the
number of type arguments in the key is skipped, so a bare origin such
as ``Monoid.of(dict)`` is simply not found.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from itertools import groupby
from typing import Any, TypeVar, get_args, get_origin

from felis.kernel.errors import AmbiguousInstanceError, NoInstanceError
from felis.kernel.typeclass import TypeClass

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TypeClass)

Rule = Callable[..., TypeClass]


@dataclass(frozen=True)
class Entry:
    """A registered way of producing a capability for one origin."""

    capability: type[TypeClass]
    origin: Hashable
    rule: Rule
    priority: int = 0

    @property
    def depth(self) -> int:
        return sum(1 for cls in self.capability.__mro__ if issubclass(cls, TypeClass))

    @property
    def rank(self) -> tuple[int, int]:
        return (self.priority, self.depth)


def split_key(key: tuple[Any, ...]) -> tuple[Hashable, tuple[Any, ...]]:
    """Normalise a type key into ``(origin, args)``."""
    if not key:
        raise ValueError("A type key needs at least an origin")
    head, rest = key[0], key[1:]
    origin = get_origin(head)
    if origin is None:
        return head, tuple(rest)
    if rest:
        raise ValueError(f"Cannot add arguments {rest!r} to the parameterised key {head!r}")
    return origin, get_args(head)


def _accepts(rule: Rule, registry: Registry, args: tuple[Any, ...]) -> bool:
    """Whether ``rule`` can be called with this many type arguments."""
    try:
        inspect.signature(rule).bind(registry, *args)
    except TypeError:
        return False
    return True


def _describe(origin: Any, args: tuple[Any, ...]) -> str:
    name = getattr(origin, "__name__", repr(origin))
    if not args:
        return name
    return f"{name}[{', '.join(getattr(a, '__name__', repr(a)) for a in args)}]"


class Registry:
    """Registry of instances and derivation rules."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, list[Entry]] = {}
        self._cache: dict[tuple[Any, ...], TypeClass] = {}

    def register(
        self,
        capability: type[T],
        origin: Hashable,
        instance: T,
        priority: int = 0,
    ) -> None:
        """Register a ready-made instance for every key with this origin."""
        if not isinstance(instance, capability):
            raise TypeError(
                f"{type(instance).__name__} does not implement {capability.__name__}"
            )
        self._add(Entry(capability, origin, lambda _registry, *_args: instance, priority))

    def derive(
        self,
        capability: type[T],
        origin: Hashable,
        priority: int = 0,
    ) -> Callable[[Rule], Rule]:
        """Register a rule ``rule(registry, *args)`` building an instance from components.

        Used as a decorator::

            @registry.derive(Monoid, tuple)
            def _tuple(registry, *args):
                return TupleMonoid(tuple(registry.resolve(Monoid, a) for a in args))
        """

        def decorator(rule: Rule) -> Rule:
            self._add(Entry(capability, origin, rule, priority))
            return rule

        return decorator

    def resolve(self, capability: type[T], *key: Any) -> T:
        """Return the canonical instance of ``capability`` for ``key``.

        Raises:
            NoInstanceError: nothing registered applies
            AmbiguousInstanceError: two rules of equal precedence apply
        """
        origin, args = split_key(key)
        cache_key = (capability, origin, args)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached  # type: ignore[return-value]

        instance = self._search(capability, origin, args)
        self._cache[cache_key] = instance
        return instance  # type: ignore[return-value]

    def find(self, capability: type[T], *key: Any) -> T | None:
        """Like ``resolve``, but ``None`` when no instance exists."""
        try:
            return self.resolve(capability, *key)
        except NoInstanceError:
            return None

    def entries(self, origin: Hashable) -> tuple[Entry, ...]:
        return tuple(self._entries.get(origin, ()))

    def __contains__(self, origin: object) -> bool:
        return origin in self._entries

    def _add(self, entry: Entry) -> None:
        self._entries.setdefault(entry.origin, []).append(entry)
        # A new entry may change precedence for keys already resolved.
        self._cache.clear()

    def _search(self, capability: type[T], origin: Hashable, args: tuple[Any, ...]) -> TypeClass:
        described = _describe(origin, args)
        candidates = [
            entry
            for entry in self._entries.get(origin, ())
            if issubclass(entry.capability, capability)
        ]
        candidates.sort(key=lambda entry: entry.rank, reverse=True)

        for rank, tier in groupby(candidates, key=lambda entry: entry.rank):
            found: list[TypeClass] = []
            for entry in tier:
                if not _accepts(entry.rule, self, args):
                    logger.debug(
                        "%s rule for %s takes a different number of type arguments",
                        entry.capability.__name__,
                        described,
                    )
                    continue
                try:
                    instance = entry.rule(self, *args)
                except NoInstanceError as exc:
                    logger.debug(
                        "%s rule for %s declined: %s",
                        entry.capability.__name__,
                        described,
                        exc,
                    )
                    continue
                if not isinstance(instance, capability):
                    raise TypeError(
                        f"Rule for {capability.__name__}[{described}] produced "
                        f"{type(instance).__name__}"
                    )
                if not any(instance is other for other in found):
                    found.append(instance)

            if len(found) > 1:
                raise AmbiguousInstanceError(
                    f"Ambiguous {capability.__name__} instances for {described} at rank {rank}",
                    capability,
                    (origin, *args),
                    tuple(found),
                )
            if found:
                logger.debug(
                    "resolved %s[%s] to %r", capability.__name__, described, found[0]
                )
                return found[0]

        raise NoInstanceError(
            f"No {capability.__name__} instance for {described}",
            capability,
            (origin, *args),
        )


_default: Registry | None = None


def default_registry() -> Registry:
    """The process-wide registry with every built-in instance installed."""
    global _default
    if _default is None:
        from felis.instances import install

        registry = Registry()
        install(registry)
        _default = registry
    return _default


def given(capability: type[T], *key: Any, registry: Registry | None = None) -> T:
    """Resolve ``capability`` for ``key`` against ``registry`` or the default one."""
    return (registry or default_registry()).resolve(capability, *key)
