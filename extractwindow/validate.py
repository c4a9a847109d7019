from __future__ import annotations
from typing import Optional, Sequence

import pandas as pd

from . import algebra, exceptions
from .interval import Interval


def assert_plan(
    plan: Sequence[Interval],
    total: Interval,
    max_length: Optional[pd.Timedelta] = None,
) -> None:
    """Raise if plan is not an ordered, gap-free, exact cover of total."""
    if len(plan) == 0:
        raise exceptions.ExtractWindowError("Plan must contain at least one chunk.")
    if plan[0].start != total.start:
        raise exceptions.ExtractWindowError(
            f"Plan starts at {plan[0].start}, expected {total.start}."
        )
    if plan[-1].end_exclusive != total.end_exclusive:
        raise exceptions.ExtractWindowError(
            f"Plan ends at {plan[-1].end_exclusive}, expected {total.end_exclusive}."
        )
    if not algebra.is_contiguous(plan):
        raise exceptions.ExtractWindowError("Plan has gaps or overlapping chunks.")
    if max_length is not None:
        longest = max(iv.duration for iv in plan)
        if longest > max_length:
            raise exceptions.ExtractWindowError(
                f"Chunk of {longest} exceeds the chunk length {max_length}."
            )


def validate_concurrency(concurrency: int) -> int:
    if isinstance(concurrency, bool) or not isinstance(concurrency, int):
        raise TypeError(f"concurrency must be an int, got {type(concurrency).__name__}")
    if concurrency < 1:
        raise ValueError(f"concurrency must be positive, got {concurrency}")
    return concurrency
