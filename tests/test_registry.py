from __future__ import annotations

import logging

import pytest

from felis import (
    AmbiguousInstanceError,
    Functor,
    Group,
    Monad,
    Monoid,
    NoInstanceError,
    Option,
    OptionT,
    Registry,
    Semigroup,
    default_registry,
    given,
)
from felis.data.option_t import OptionTFunctor, OptionTMonad
from felis.instances import install
from felis.instances.algebra import INT_GROUP, STR_MONOID, TupleGroup, TupleMonoid
from felis.instances.lists import LIST_INSTANCE
from felis.registry import split_key

from fakes import Box, BoxFunctor, BoxMonad, JoinMonoid


@pytest.fixture
def registry() -> Registry:
    registry = Registry()
    install(registry)
    return registry


class TestPrecedence:
    """Which entry answers when several apply."""

    def test_deeper_capability_wins_within_priority(self):
        registry = Registry()
        registry.register(Functor, Box, BoxFunctor())
        registry.register(Monad, Box, BoxMonad())
        assert isinstance(registry.resolve(Functor, Box), BoxMonad)

    def test_higher_priority_wins(self, registry):
        loud = JoinMonoid(separator=" ")
        registry.register(Monoid, str, loud, priority=1)
        assert registry.resolve(Monoid, str) is loud
        assert registry.resolve(Semigroup, str) is loud

    def test_option_t_functor_prefers_monad_rule(self, registry):
        functor = registry.resolve(Functor, OptionT, list)
        assert isinstance(functor, OptionTMonad)
        assert functor.inner is LIST_INSTANCE

    def test_option_t_functor_falls_back_without_inner_monad(self, registry):
        registry.register(Functor, Box, BoxFunctor())
        functor = registry.resolve(Functor, OptionT, Box)
        assert isinstance(functor, OptionTFunctor)
        with pytest.raises(NoInstanceError):
            registry.resolve(Monad, OptionT, Box)

    def test_tuple_group_declines_to_monoid(self, registry):
        assert isinstance(registry.resolve(Monoid, tuple[int, str]), TupleMonoid)
        assert isinstance(registry.resolve(Monoid, tuple[int, int]), TupleGroup)

    def test_declined_rule_is_logged(self, registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="felis.registry"):
            registry.resolve(Monoid, tuple[int, str])
        assert "declined" in caplog.text


class TestAmbiguity:
    def test_two_instances_in_one_tier(self, registry):
        registry.register(Monoid, str, JoinMonoid(separator="-"))
        with pytest.raises(AmbiguousInstanceError) as excinfo:
            registry.resolve(Monoid, str)
        assert len(excinfo.value.candidates) == 2
        assert excinfo.value.capability is Monoid

    def test_same_instance_twice_is_not_ambiguous(self, registry):
        registry.register(Monoid, str, STR_MONOID)
        assert registry.resolve(Monoid, str) is STR_MONOID


class TestMissing:
    def test_no_instance(self, registry):
        with pytest.raises(NoInstanceError) as excinfo:
            registry.resolve(Monoid, complex)
        assert excinfo.value.capability is Monoid
        assert excinfo.value.key == (complex,)
        assert "NoInstanceError" in repr(excinfo.value)

    def test_missing_component(self, registry):
        with pytest.raises(NoInstanceError):
            registry.resolve(Group, tuple[int, str])

    def test_find_returns_none(self, registry):
        assert registry.find(Monoid, complex) is None
        assert registry.find(Monoid, str) is STR_MONOID

    def test_instance_error_is_lookup_error(self, registry):
        with pytest.raises(LookupError):
            registry.resolve(Monad, Box)

    @pytest.mark.parametrize(
        ("capability", "origin"),
        [
            (Monoid, dict),
            (Monoid, Option),
            (Semigroup, Option),
            (Monad, OptionT),
            (Functor, OptionT),
        ],
    )
    def test_bare_origin_is_not_found(self, registry, capability, origin):
        """A rule expecting type arguments declines a key that has none."""
        assert registry.find(capability, origin) is None
        with pytest.raises(NoInstanceError) as excinfo:
            registry.resolve(capability, origin)
        assert excinfo.value.key == (origin,)

    def test_bare_origin_through_capability(self):
        with pytest.raises(NoInstanceError):
            Monad.of(OptionT)
        assert Monoid.of(dict[str, int]).combine({"a": 1}, {"a": 2}) == {"a": 3}


class TestRegistration:
    def test_register_checks_capability(self):
        with pytest.raises(TypeError, match="does not implement Monad"):
            Registry().register(Monad, int, INT_GROUP)

    def test_rule_must_produce_capability(self):
        registry = Registry()

        @registry.derive(Monoid, Box)
        def _wrong(_registry, *_args):
            return BoxFunctor()

        with pytest.raises(TypeError, match="produced BoxFunctor"):
            registry.resolve(Monoid, Box)

    def test_entries_and_contains(self, registry):
        assert str in registry
        assert Box not in registry
        assert [entry.capability for entry in registry.entries(str)] == [Monoid]


class TestCaching:
    def test_derived_instances_are_cached(self, registry):
        first = registry.resolve(Monoid, tuple[str, int])
        assert registry.resolve(Monoid, tuple[str, int]) is first

    def test_registration_clears_cache(self, registry):
        first = registry.resolve(Monoid, tuple[str, int])
        registry.register(Monoid, Box, JoinMonoid())
        assert registry.resolve(Monoid, tuple[str, int]) is not first


class TestKeys:
    def test_alias_and_origin_forms_agree(self, registry):
        assert registry.resolve(Monoid, tuple[str, int]) is registry.resolve(Monoid, tuple, str, int)

    def test_split_key(self):
        assert split_key((dict[str, int],)) == (dict, (str, int))
        assert split_key((OptionT, list)) == (OptionT, (list,))

    def test_empty_key(self):
        with pytest.raises(ValueError):
            split_key(())

    def test_arguments_after_alias(self):
        with pytest.raises(ValueError):
            split_key((tuple[int], int))


def test_default_registry_is_shared():
    assert default_registry() is default_registry()
    assert given(Monoid, str) is STR_MONOID
    assert Monoid.of(str) is STR_MONOID
    assert Monoid.of(int) is INT_GROUP


def test_of_accepts_registry():
    registry = Registry()
    registry.register(Monad, Box, BoxMonad())
    assert isinstance(Monad.of(Box, registry=registry), BoxMonad)
    with pytest.raises(NoInstanceError):
        Monad.of(Box)
