"""Law equations and settings for checking instances.

The hypothesis-driven suites live in ``felis.laws.discipline`` and need
the ``laws`` extra installed.
"""

from felis.laws.equations import (
    CoflatMapLaws,
    ComonadLaws,
    FlatMapLaws,
    FunctorLaws,
    GroupLaws,
    IsEq,
    LawViolation,
    MonadLaws,
    MonoidLaws,
    SemigroupLaws,
    tail_rec_m_stack_safety,
)
from felis.laws.settings import LawSettings

__all__ = [
    "IsEq",
    "LawViolation",
    "LawSettings",
    # Algebras
    "SemigroupLaws",
    "MonoidLaws",
    "GroupLaws",
    # Shapes
    "FunctorLaws",
    "FlatMapLaws",
    "MonadLaws",
    "CoflatMapLaws",
    "ComonadLaws",
    "tail_rec_m_stack_safety",
]
