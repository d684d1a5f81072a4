from __future__ import annotations

import pytest

from felis import NOTHING, CoflatMap, Comonad, EitherK, Eval, Id, NoInstanceError, NonEmptyList, Option, Some
from felis.laws.discipline import coflat_map_laws, comonad_laws

from gens import SETTINGS, either_ks, evals, ints, non_empty_lists, options

LAW_SUITES = [
    coflat_map_laws(CoflatMap.of(Option), options, SETTINGS),
    comonad_laws(Comonad.of(Eval), evals, SETTINGS),
    comonad_laws(Comonad.of(Id), ints, SETTINGS),
    comonad_laws(Comonad.of(NonEmptyList), non_empty_lists, SETTINGS),
    comonad_laws(Comonad.of(EitherK, NonEmptyList, Eval), either_ks, SETTINGS),
]


@pytest.mark.parametrize(
    "suite,law",
    [(suite, law) for suite in LAW_SUITES for law in suite],
    ids=lambda value: value if isinstance(value, str) else value.name,
)
def test_comonad_laws(suite, law):
    suite[law]()


def test_non_empty_list_walks_suffixes():
    W = Comonad.of(NonEmptyList)
    nel = NonEmptyList.of(1, 2, 3)
    assert W.coflat_map(nel, sum) == NonEmptyList.of(6, 5, 3)
    assert W.coflatten(nel) == NonEmptyList.of(
        NonEmptyList.of(1, 2, 3), NonEmptyList.of(2, 3), NonEmptyList.of(3)
    )
    assert W.extract(nel) == 1


def test_option_coflat_map():
    F = CoflatMap.of(Option)
    assert F.coflat_map(Some(2), lambda o: o.get_or_else(0) * 10) == Some(20)
    assert F.coflat_map(NOTHING, lambda o: 1) == NOTHING
    assert F.coflatten(Some(1)) == Some(Some(1))


def test_option_has_no_comonad():
    with pytest.raises(NoInstanceError):
        Comonad.of(Option)


def test_eval_coflat_map_is_lazy():
    seen = []
    W = Comonad.of(Eval)
    result = W.coflat_map(Eval.now(3), lambda e: seen.append(e.value) or e.value + 1)
    assert seen == []
    assert W.extract(result) == 4
    assert seen == [3]


def test_id_comonad_is_identity():
    W = Comonad.of(Id)
    assert W.extract(5) == 5
    assert W.coflat_map(5, lambda a: a * 2) == 10
