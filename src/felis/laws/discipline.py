"""Property-based law suites built with hypothesis.

Every builder takes an instance plus strategies for its values and
returns a ``RuleSet``: one zero-argument property per law. Calling a
property generates inputs and raises ``LawViolation`` (an
``AssertionError``) on the first counterexample::

    rules = monoid_laws(Monoid.of(str), st.text())
    rules.check_all()

or, under pytest, one test per law::

    @pytest.mark.parametrize("name", list(rules))
    def test_laws(name):
        rules[name]()

Functions fed to the laws come from ``st.functions(pure=True)``, so the
values they are applied to must be hashable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from felis.core.coflat_map import CoflatMap, Comonad
from felis.core.flat_map import Monad
from felis.core.functor import Functor
from felis.kernel.semigroup import Group, Monoid, Semigroup
from felis.laws.equations import (
    CoflatMapLaws,
    ComonadLaws,
    FunctorLaws,
    GroupLaws,
    IsEq,
    MonadLaws,
    MonoidLaws,
    SemigroupLaws,
    tail_rec_m_stack_safety,
)
from felis.laws.settings import LawSettings

logger = logging.getLogger(__name__)

Property = Callable[[], None]
LawTable = dict[str, tuple[Callable[..., IsEq[Any]], tuple[SearchStrategy[Any], ...]]]


@dataclass(frozen=True)
class RuleSet(Mapping[str, Property]):
    """Named properties checking the laws of one instance."""

    name: str
    props: Mapping[str, Property]

    def __getitem__(self, law: str) -> Property:
        return self.props[law]

    def __iter__(self) -> Iterator[str]:
        return iter(self.props)

    def __len__(self) -> int:
        return len(self.props)

    def check_all(self) -> None:
        for law, prop in self.props.items():
            logger.debug("checking %s.%s", self.name, law)
            prop()


def _property(
    law: Callable[..., IsEq[Any]],
    strategies: tuple[SearchStrategy[Any], ...],
    config: LawSettings,
) -> Property:
    # One tuple strategy: @given does not accept positional strategies with *args.
    @settings(
        max_examples=config.max_examples,
        derandomize=config.derandomize,
        deadline=config.deadline_ms,
        suppress_health_check=[HealthCheck.too_slow],
        database=None,
    )
    @given(st.tuples(*strategies))
    def prop(args: tuple[Any, ...]) -> None:
        law(*args).check()

    return prop


def _rules(name: str, config: LawSettings, table: LawTable) -> RuleSet:
    return RuleSet(
        name=name,
        props={law: _property(fn, strategies, config) for law, (fn, strategies) in table.items()},
    )


def _name(instance: Any) -> str:
    return type(instance).__name__


def semigroup_laws(
    instance: Semigroup[Any],
    values: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    config = config or LawSettings()
    laws = SemigroupLaws(instance)
    return _rules(_name(instance), config, _semigroup_table(laws, values))


def monoid_laws(
    instance: Monoid[Any],
    values: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    config = config or LawSettings()
    laws = MonoidLaws(instance)
    return _rules(_name(instance), config, _monoid_table(laws, values))


def group_laws(
    instance: Group[Any],
    values: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    config = config or LawSettings()
    laws = GroupLaws(instance)
    table = _monoid_table(laws, values)
    table.update(
        left_inverse=(laws.left_inverse, (values,)),
        right_inverse=(laws.right_inverse, (values,)),
        consistent_inverse=(laws.consistent_inverse, (values, values)),
        negative_repeat=(laws.negative_repeat, (values, st.integers(1, 64))),
    )
    return _rules(_name(instance), config, table)


def _semigroup_table(laws: SemigroupLaws[Any], values: SearchStrategy[Any]) -> LawTable:
    return {
        "associativity": (laws.associativity, (values, values, values)),
        "repeat_1": (laws.repeat_1, (values,)),
        "repeat_2": (laws.repeat_2, (values,)),
        "repeat_n": (laws.repeat_n, (values, st.integers(1, 64))),
        "combine_all_option": (laws.combine_all_option, (st.lists(values, max_size=8),)),
        "reverse_reverses": (laws.reverse_reverses, (values, values)),
    }


def _monoid_table(laws: MonoidLaws[Any], values: SearchStrategy[Any]) -> LawTable:
    table = _semigroup_table(laws, values)
    table.update(
        left_identity=(laws.left_identity, (values,)),
        right_identity=(laws.right_identity, (values,)),
        repeat_0=(laws.repeat_0, (values,)),
        collect_0=(laws.collect_0, ()),
        combine_all=(laws.combine_all, (st.lists(values, max_size=8),)),
        is_id=(laws.is_id, (values,)),
    )
    return table


def _int_functions() -> SearchStrategy[Callable[[Any], int]]:
    return st.functions(like=lambda a: a, returns=st.integers(-1000, 1000), pure=True)


def functor_laws(
    instance: Functor,
    containers: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    """Laws for ``instance`` given a strategy of shapes holding integers."""
    config = config or LawSettings()
    laws = FunctorLaws(instance)
    return _rules(_name(instance), config, _functor_table(laws, containers))


def _functor_table(laws: FunctorLaws, containers: SearchStrategy[Any]) -> LawTable:
    return {
        "covariant_identity": (laws.covariant_identity, (containers,)),
        "covariant_composition": (
            laws.covariant_composition,
            (containers, _int_functions(), _int_functions()),
        ),
    }


def monad_laws(
    instance: Monad,
    containers: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    """Laws for ``instance`` given a strategy of shapes holding integers.

    Includes a fixed stack-safety check driving ``tail_rec_m`` for
    ``config.stack_safety_iterations`` steps.
    """
    config = config or LawSettings()
    laws = MonadLaws(instance)
    kleisli = st.functions(like=lambda a: a, returns=containers, pure=True)
    wrapped_functions = containers.map(
        lambda fa: instance.map(fa, lambda offset: lambda a: a + offset)
    )
    ints = st.integers(-1000, 1000)

    table = _functor_table(laws, containers)
    table.update(
        left_identity=(laws.left_identity, (ints, kleisli)),
        right_identity=(laws.right_identity, (containers,)),
        map_flat_map_coherence=(laws.map_flat_map_coherence, (containers, _int_functions())),
        flat_map_associativity=(laws.flat_map_associativity, (containers, kleisli, kleisli)),
        flat_map_consistent_apply=(laws.flat_map_consistent_apply, (containers, wrapped_functions)),
        mproduct_consistency=(laws.mproduct_consistency, (containers, kleisli)),
        tail_rec_m_consistent_flat_map=(laws.tail_rec_m_consistent_flat_map, (ints, kleisli)),
    )
    rules = _rules(_name(instance), config, table)

    def stack_safety() -> None:
        tail_rec_m_stack_safety(instance, config.stack_safety_iterations).check()

    return RuleSet(name=rules.name, props={**rules.props, "tail_rec_m_stack_safety": stack_safety})


def _observers() -> SearchStrategy[Callable[[Any], int]]:
    return st.functions(like=lambda fa: fa, returns=st.integers(-1000, 1000), pure=True)


def _coflat_map_table(laws: CoflatMapLaws, containers: SearchStrategy[Any]) -> LawTable:
    observers = _observers()
    table = _functor_table(laws, containers)
    table.update(
        coflat_map_associativity=(laws.coflat_map_associativity, (containers, observers, observers)),
        coflatten_through_map=(laws.coflatten_through_map, (containers,)),
        coflat_map_coherence=(laws.coflat_map_coherence, (containers, observers)),
    )
    return table


def coflat_map_laws(
    instance: CoflatMap,
    containers: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    """Laws for ``instance`` given a strategy of hashable shapes holding integers."""
    config = config or LawSettings()
    return _rules(_name(instance), config, _coflat_map_table(CoflatMapLaws(instance), containers))


def comonad_laws(
    instance: Comonad,
    containers: SearchStrategy[Any],
    config: LawSettings | None = None,
) -> RuleSet:
    """Laws for ``instance`` given a strategy of hashable shapes holding integers."""
    config = config or LawSettings()
    laws = ComonadLaws(instance)
    observers = _observers()

    table = _coflat_map_table(laws, containers)
    table.update(
        extract_coflatten_identity=(laws.extract_coflatten_identity, (containers,)),
        map_coflatten_identity=(laws.map_coflatten_identity, (containers,)),
        coflat_map_identity=(laws.coflat_map_identity, (containers,)),
        comonad_right_identity=(laws.comonad_right_identity, (containers, observers)),
    )
    return _rules(_name(instance), config, table)
