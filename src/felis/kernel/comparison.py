"""Three-way comparison results."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any


class Comparison(Enum):
    """ADT encoding the possible results of a comparison."""

    GREATER_THAN = 1
    EQUAL_TO = 0
    LESS_THAN = -1

    @property
    def to_int(self) -> int:
        return self.value

    @property
    def to_double(self) -> float:
        return float(self.value)

    @classmethod
    def from_int(cls, value: int) -> Comparison:
        if value > 0:
            return cls.GREATER_THAN
        if value == 0:
            return cls.EQUAL_TO
        return cls.LESS_THAN

    @classmethod
    def from_double(cls, value: float) -> Comparison | None:
        """Map the sign of ``value`` to a comparison.

        NaN has no ordering relationship, so it maps to ``None``.
        Both ``0.0`` and ``-0.0`` map to ``EQUAL_TO``.
        """
        if math.isnan(value):
            return None
        if value > 0.0:
            return cls.GREATER_THAN
        if value == 0.0:
            return cls.EQUAL_TO
        return cls.LESS_THAN

    @classmethod
    def compare(cls, x: Any, y: Any) -> Comparison:
        """Compare two values with their natural ordering."""
        return cls.from_int((x > y) - (x < y))
