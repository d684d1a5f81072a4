from __future__ import annotations

import pytest

from felis import (
    NOTHING,
    Either,
    Eval,
    Id,
    Left,
    Monad,
    NonEmptyList,
    Option,
    OptionT,
    Right,
    Some,
)
from felis.laws.discipline import monad_laws

from gens import SETTINGS, eithers, evals, int_lists, ints, non_empty_lists, option_ts, options

LAW_SUITES = [
    monad_laws(Monad.of(Option), options, SETTINGS),
    monad_laws(Monad.of(Either), eithers, SETTINGS),
    monad_laws(Monad.of(list), int_lists, SETTINGS),
    monad_laws(Monad.of(Eval), evals, SETTINGS),
    monad_laws(Monad.of(Id), ints, SETTINGS),
    monad_laws(Monad.of(NonEmptyList), non_empty_lists, SETTINGS),
    monad_laws(Monad.of(OptionT, list), option_ts, SETTINGS),
]


@pytest.mark.parametrize(
    "suite,law",
    [(suite, law) for suite in LAW_SUITES for law in suite],
    ids=lambda value: value if isinstance(value, str) else value.name,
)
def test_monad_laws(suite, law):
    suite[law]()


class TestTailRecM:
    """``tail_rec_m`` runs in constant native stack."""

    def count_to(self, monad: Monad, n: int):
        return monad.tail_rec_m(0, lambda i: monad.pure(Left(i + 1) if i < n else Right(i)))

    @pytest.mark.parametrize("shape", [Option, Either, list, Eval, Id, NonEmptyList])
    def test_deep_loop(self, shape):
        monad = Monad.of(shape)
        assert self.count_to(monad, 200_000) == monad.pure(200_000)

    def test_option_stops_on_nothing(self):
        result = Monad.of(Option).tail_rec_m(0, lambda i: NOTHING if i == 3 else Some(Left(i + 1)))
        assert result == NOTHING

    def test_either_stops_on_left(self):
        result = Monad.of(Either).tail_rec_m(0, lambda i: Left("boom") if i == 3 else Right(Left(i + 1)))
        assert result == Left("boom")

    def test_list_branches_depth_first(self):
        def step(i):
            if i >= 2:
                return [Right(i)]
            return [Left(i + 1), Right(-i)]

        assert Monad.of(list).tail_rec_m(0, step) == [2, -1, 0]

    def test_eval_is_lazy(self):
        calls = []

        def step(i):
            calls.append(i)
            return Eval.now(Right(i))

        result = Monad.of(Eval).tail_rec_m(7, step)
        assert calls == []
        assert result.value == 7
        assert calls == [7]

    def test_option_t_over_list(self):
        monad = Monad.of(OptionT, list)
        assert self.count_to(monad, 100_000) == OptionT([Some(100_000)])

        result = monad.tail_rec_m(0, lambda i: OptionT([NOTHING, Some(Right(i))]))
        assert result == OptionT([NOTHING, Some(0)])

    @pytest.mark.parametrize("shape", [Option, list, Eval, Id, NonEmptyList])
    def test_step_must_be_either(self, shape):
        monad = Monad.of(shape)
        with pytest.raises(TypeError, match="Left or Right"):
            result = monad.tail_rec_m(0, lambda i: monad.pure(i))
            if isinstance(result, Eval):
                result.value


class TestDerivedOperations:
    def test_flatten(self):
        assert Monad.of(list).flatten([[1], [2, 3], []]) == [1, 2, 3]
        assert Monad.of(Option).flatten(Some(Some(1))) == Some(1)

    def test_ap_and_product(self):
        F = Monad.of(list)
        assert F.ap([lambda a: a + 1, lambda a: a * 10], [1, 2]) == [2, 3, 10, 20]
        assert F.product([1, 2], ["a"]) == [(1, "a"), (2, "a")]
        assert Monad.of(Option).map2(Some(1), Some(2), lambda a, b: a + b) == Some(3)

    def test_ap2(self):
        F = Monad.of(Option)
        assert F.ap2(Some(lambda a, b: a - b), Some(5), Some(3)) == Some(2)
        assert F.ap2(Some(lambda a, b: a - b), NOTHING, Some(3)) == NOTHING

    def test_product_l_and_r(self):
        F = Monad.of(Either)
        assert F.product_r(Right(1), Right(2)) == Right(2)
        assert F.product_l(Right(1), Right(2)) == Right(1)
        assert F.product_r(Left("e"), Right(2)) == Left("e")

    def test_product_r_eval_skips_on_empty(self):
        forced = []

        def thunk():
            forced.append(True)
            return Some(2)

        F = Monad.of(Option)
        assert F.product_r_eval(NOTHING, Eval.later(thunk)) == NOTHING
        assert forced == []
        assert F.product_r_eval(Some(1), Eval.later(thunk)) == Some(2)
        assert forced == [True]

    def test_product_l_eval(self):
        F = Monad.of(Option)
        assert F.product_l_eval(Some(1), Eval.now(Some(2))) == Some(1)
        assert F.product_l_eval(Some(1), Eval.now(NOTHING)) == NOTHING

    def test_if_m_builds_one_branch(self):
        F = Monad.of(Option)

        def fail():
            raise AssertionError("branch should not be built")

        assert F.if_m(Some(True), lambda: Some("yes"), fail) == Some("yes")
        assert F.if_m(Some(False), fail, lambda: Some("no")) == Some("no")
        assert F.if_m(NOTHING, fail, fail) == NOTHING

    def test_mproduct_and_flat_tap(self):
        F = Monad.of(list)
        assert F.mproduct([1, 2], lambda a: [a] * a) == [(1, 1), (2, 2), (2, 2)]
        assert F.flat_tap([1, 2], lambda a: ["x"] * a) == [1, 2, 2]

    def test_iterate_while_m(self):
        F = Monad.of(Option)
        assert F.iterate_while_m(1, lambda a: Some(a * 2), lambda a: a < 100) == Some(128)
        assert F.iterate_until_m(1, lambda a: Some(a + 1), lambda a: a == 5) == Some(5)

    def test_iterate_while_reruns_effect(self):
        runs = []

        def tick():
            runs.append(len(runs))
            return len(runs)

        F = Monad.of(Eval)
        counter = Eval.always(tick)
        assert F.iterate_while(counter, lambda n: n < 4).value == 4
        assert F.iterate_until(counter, lambda n: n >= 6).value == 6

    def test_iterate_until_is_stack_safe(self):
        F = Monad.of(Id)
        assert F.iterate_until_m(0, lambda a: a + 1, lambda a: a == 150_000) == 150_000

    def test_unit_and_pure(self):
        assert Monad.of(list).unit() == [()]
        assert Monad.of(OptionT, list).pure(1) == OptionT([Some(1)])
