"""Plain data types used by the capabilities.

The composite types live in their own modules (``felis.data.option_t``,
``felis.data.either_k``, ``felis.data.cokleisli``) because they depend
on ``felis.core``, which itself depends on the types exported here.
"""

from felis.data.either import Either, Left, Right, ensure_either
from felis.data.eval import Always, Eval, FlatMapped, Later, Now
from felis.data.identity import Id
from felis.data.nonempty import NonEmptyList
from felis.data.option import NOTHING, Nothing, Option, Some

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "Either",
    "Left",
    "Right",
    "ensure_either",
    "Eval",
    "Now",
    "Later",
    "Always",
    "FlatMapped",
    "NonEmptyList",
    "Id",
]
