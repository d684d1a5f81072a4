from __future__ import annotations

import pytest

from felis import Cokleisli, Comonad, Left, Monad, NonEmptyList, Right
from felis.data.cokleisli import COKLEISLI_MONAD

W = Comonad.of(NonEmptyList)
nel = NonEmptyList.of(1, 2, 3)
total = Cokleisli(sum)


def test_run_and_pure():
    assert total(nel) == 6
    assert total.run(nel) == 6
    assert Cokleisli.pure(5)(nel) == 5


def test_lift_reads_focus():
    assert Cokleisli.lift(lambda a: a * 10, W)(nel) == 10


class TestProfunctor:
    def test_dimap(self):
        assert total.dimap(lambda a: a * 2, str, W)(nel) == "12"

    def test_lmap_and_map(self):
        assert total.lmap(lambda a: a + 1, W)(nel) == 9
        assert total.map(str)(nel) == "6"

    def test_contramap_value(self):
        assert total.contramap_value(lambda fa: fa.map(lambda a: -a))(nel) == -6


class TestComposition:
    """Composition runs the inner function at every position first."""

    def test_compose(self):
        head = Cokleisli(lambda fa: fa.head)
        assert head.compose(total, W)(nel) == 6

    def test_and_then(self):
        assert total.and_then(Cokleisli(NonEmptyList.to_list), W)(nel) == [6, 5, 3]

    def test_first_and_second(self):
        pairs = NonEmptyList.of((1, "a"), (2, "b"))
        assert total.first(W)(pairs) == (3, "a")
        swapped = NonEmptyList.of(("a", 1), ("b", 2))
        assert total.second(W)(swapped) == ("a", 3)

    def test_split(self):
        pairs = NonEmptyList.of((1, "a"), (2, "bb"))
        assert total.split(Cokleisli(len), W)(pairs) == (3, 2)


class TestMonad:
    M = Monad.of(Cokleisli, NonEmptyList)

    def test_resolves_for_any_shape(self):
        assert self.M is COKLEISLI_MONAD
        assert Monad.of(Cokleisli, list) is COKLEISLI_MONAD

    def test_flat_map_shares_input(self):
        scaled = self.M.flat_map(total, lambda b: Cokleisli(len).map(lambda n: b * n))
        assert scaled(nel) == 18

    def test_identities(self):
        f = lambda b: Cokleisli(lambda fa: b + fa.head)  # noqa: E731
        assert self.M.flat_map(self.M.pure(3), f)(nel) == f(3)(nel)
        assert self.M.flat_map(total, self.M.pure)(nel) == total(nel)

    def test_tail_rec_m_is_stack_safe(self):
        def step(i):
            return Cokleisli(lambda fa: Left(i + fa.head) if i < 100_000 else Right(i))

        assert self.M.tail_rec_m(0, step)(NonEmptyList.of(1)) == 100_000

    def test_tail_rec_m_rejects_other_steps(self):
        looped = self.M.tail_rec_m(0, lambda i: Cokleisli(lambda fa: i))
        with pytest.raises(TypeError, match="Left or Right"):
            looped(nel)
