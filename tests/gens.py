from __future__ import annotations

from hypothesis import strategies as st

from felis import NOTHING, EitherK, Eval, Left, NonEmptyList, OptionT, Right, Some
from felis.laws import LawSettings

SETTINGS = LawSettings(max_examples=50, derandomize=True, stack_safety_iterations=100_000)

ints = st.integers(-1000, 1000)

options = st.one_of(st.just(NOTHING), ints.map(Some))

eithers = st.one_of(st.text(max_size=3).map(Left), ints.map(Right))

int_lists = st.lists(ints, max_size=4)

evals = st.one_of(
    ints.map(Eval.now),
    ints.map(lambda a: Eval.later(lambda: a)),
    ints.map(lambda a: Eval.always(lambda: a)),
)

non_empty_lists = st.builds(NonEmptyList, ints, st.lists(ints, max_size=4).map(tuple))

option_ts = st.lists(options, max_size=3).map(OptionT)

either_ks = st.one_of(
    non_empty_lists.map(EitherK.left_c),
    evals.map(EitherK.right_c),
)
