"""Semigroup, Monoid and Group instances for built-in types and their compositions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, NewType, TypeVar

from felis.data.option import NOTHING, Option, Some
from felis.kernel.semigroup import Group, Monoid, Semigroup
from felis.registry import Registry

A = TypeVar("A")

Int32 = NewType("Int32", int)
"""Type key for 32-bit signed integers with wrap-around addition."""


def wrap_int32(value: int) -> int:
    """Reduce ``value`` into the signed 32-bit range, two's complement style."""
    return ((value + 2**31) & 0xFFFFFFFF) - 2**31


@dataclass(frozen=True)
class IntGroup(Group[int]):
    """Addition over Python integers."""

    @property
    def empty(self) -> int:
        return 0

    def combine(self, x: int, y: int) -> int:
        return x + y

    def inverse(self, a: int) -> int:
        return -a

    def remove(self, a: int, b: int) -> int:
        return a - b


@dataclass(frozen=True)
class Int32Group(Group[int]):
    """Addition modulo 2**32 over signed 32-bit integers."""

    @property
    def empty(self) -> int:
        return 0

    def combine(self, x: int, y: int) -> int:
        return wrap_int32(x + y)

    def inverse(self, a: int) -> int:
        return wrap_int32(-a)

    def remove(self, a: int, b: int) -> int:
        return wrap_int32(a - b)


@dataclass(frozen=True)
class FloatGroup(Group[float]):
    """Addition over floats; associativity holds up to rounding."""

    @property
    def empty(self) -> float:
        return 0.0

    def combine(self, x: float, y: float) -> float:
        return x + y

    def inverse(self, a: float) -> float:
        return -a


@dataclass(frozen=True)
class StrMonoid(Monoid[str]):
    @property
    def empty(self) -> str:
        return ""

    def combine(self, x: str, y: str) -> str:
        return x + y

    def combine_all(self, values: Iterable[str]) -> str:
        return "".join(values)


@dataclass(frozen=True)
class ListMonoid(Monoid[list[Any]]):
    @property
    def empty(self) -> list[Any]:
        return []

    def combine(self, x: list[Any], y: list[Any]) -> list[Any]:
        return [*x, *y]


@dataclass(frozen=True)
class FrozenSetMonoid(Monoid[frozenset[Any]]):
    """Union; also idempotent and commutative."""

    @property
    def empty(self) -> frozenset[Any]:
        return frozenset()

    def combine(self, x: frozenset[Any], y: frozenset[Any]) -> frozenset[Any]:
        return x | y


@dataclass(frozen=True)
class TupleSemigroup(Semigroup[tuple[Any, ...]]):
    """Component-wise combination; works for tuples of any arity."""

    components: tuple[Semigroup[Any], ...]

    def combine(self, x: tuple[Any, ...], y: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(s.combine(a, b) for s, a, b in zip(self.components, x, y, strict=True))


@dataclass(frozen=True)
class TupleMonoid(Monoid[tuple[Any, ...]]):
    components: tuple[Monoid[Any], ...]

    @property
    def empty(self) -> tuple[Any, ...]:
        return tuple(m.empty for m in self.components)

    def combine(self, x: tuple[Any, ...], y: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(m.combine(a, b) for m, a, b in zip(self.components, x, y, strict=True))


@dataclass(frozen=True)
class TupleGroup(Group[tuple[Any, ...]]):
    components: tuple[Group[Any], ...]

    @property
    def empty(self) -> tuple[Any, ...]:
        return tuple(g.empty for g in self.components)

    def combine(self, x: tuple[Any, ...], y: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(g.combine(a, b) for g, a, b in zip(self.components, x, y, strict=True))

    def inverse(self, a: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(g.inverse(v) for g, v in zip(self.components, a, strict=True))


@dataclass(frozen=True)
class OptionMonoid(Monoid[Option[A]]):
    """Adds ``Nothing`` as an identity to any semigroup."""

    semigroup: Semigroup[A]

    @property
    def empty(self) -> Option[A]:
        return NOTHING

    def combine(self, x: Option[A], y: Option[A]) -> Option[A]:
        if isinstance(x, Some) and isinstance(y, Some):
            return Some(self.semigroup.combine(x.value, y.value))
        return x if isinstance(x, Some) else y


@dataclass(frozen=True)
class DictMonoid(Monoid[dict[Any, A]]):
    """Key-wise merge; values present on both sides are combined."""

    semigroup: Semigroup[A]

    @property
    def empty(self) -> dict[Any, A]:
        return {}

    def combine(self, x: dict[Any, A], y: dict[Any, A]) -> dict[Any, A]:
        merged = dict(x)
        for key, value in y.items():
            merged[key] = self.semigroup.combine(merged[key], value) if key in merged else value
        return merged


INT_GROUP = IntGroup()
INT32_GROUP = Int32Group()
FLOAT_GROUP = FloatGroup()
STR_MONOID = StrMonoid()
LIST_MONOID = ListMonoid()
FROZENSET_MONOID = FrozenSetMonoid()


def install(registry: Registry) -> None:
    registry.register(Group, int, INT_GROUP)
    registry.register(Group, Int32, INT32_GROUP)
    registry.register(Group, float, FLOAT_GROUP)
    registry.register(Monoid, str, STR_MONOID)
    registry.register(Monoid, list, LIST_MONOID)
    registry.register(Monoid, frozenset, FROZENSET_MONOID)

    @registry.derive(Group, tuple)
    def _tuple_group(reg: Registry, *args: Any) -> TupleGroup:
        return TupleGroup(tuple(reg.resolve(Group, arg) for arg in args))

    @registry.derive(Monoid, tuple)
    def _tuple_monoid(reg: Registry, *args: Any) -> TupleMonoid:
        return TupleMonoid(tuple(reg.resolve(Monoid, arg) for arg in args))

    @registry.derive(Semigroup, tuple)
    def _tuple_semigroup(reg: Registry, *args: Any) -> TupleSemigroup:
        return TupleSemigroup(tuple(reg.resolve(Semigroup, arg) for arg in args))

    @registry.derive(Monoid, Option)
    def _option_monoid(reg: Registry, element: Any) -> OptionMonoid[Any]:
        return OptionMonoid(reg.resolve(Semigroup, element))

    @registry.derive(Monoid, dict)
    def _dict_monoid(reg: Registry, _key: Any, value: Any) -> DictMonoid[Any]:
        return DictMonoid(reg.resolve(Semigroup, value))
