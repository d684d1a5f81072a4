"""Settings for law checking."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LawSettings(BaseModel):
    """How hard the law suites try.

    Attributes:
        max_examples: Inputs generated per law.
        derandomize: Use a fixed seed so runs are reproducible.
        deadline_ms: Per-example time limit, ``None`` for no limit.
        stack_safety_iterations: Steps driven through ``tail_rec_m``.
    """

    model_config = ConfigDict(frozen=True)

    max_examples: int = Field(default=100, gt=0)
    derandomize: bool = False
    deadline_ms: int | None = Field(default=None, gt=0)
    stack_safety_iterations: int = Field(default=100_000, ge=1)
