"""Monad and Comonad for ``Eval``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from felis.core.coflat_map import Comonad
from felis.core.flat_map import Monad
from felis.data.either import Right, ensure_either
from felis.data.eval import Eval
from felis.registry import Registry

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class EvalInstance(Monad, Comonad):
    def pure(self, a: A) -> Eval[A]:
        return Eval.now(a)

    def map(self, fa: Eval[A], f: Callable[[A], B]) -> Eval[B]:
        return fa.map(f)

    def flat_map(self, fa: Eval[A], f: Callable[[A], Eval[B]]) -> Eval[B]:
        return fa.flat_map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], Eval[Any]]) -> Eval[B]:
        def loop() -> B:
            current = a
            while True:
                step = ensure_either(f(current).value)
                if isinstance(step, Right):
                    return step.value
                current = step.value

        return Eval.later(loop)

    def coflat_map(self, fa: Eval[A], f: Callable[[Eval[A]], B]) -> Eval[B]:
        return Eval.later(lambda: f(fa))

    def extract(self, fa: Eval[A]) -> A:
        return fa.value


EVAL_INSTANCE = EvalInstance()


def install(registry: Registry) -> None:
    registry.register(Monad, Eval, EVAL_INSTANCE)
    registry.register(Comonad, Eval, EVAL_INSTANCE)
