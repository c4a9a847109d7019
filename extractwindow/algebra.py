from __future__ import annotations
from functools import reduce
from typing import Iterable, Sequence

import pandas as pd

from . import exceptions
from .interval import Interval


def span_all(intervals: Iterable[Interval]) -> Interval:
    """Fold `Interval.span` across intervals (bounding union of all of them)."""
    items = list(intervals)
    exceptions.require(
        len(items) > 0,
        "span_all requires at least one interval.",
        exceptions.EmptyInputError,
    )
    return reduce(lambda acc, iv: acc.span(iv), items)


def sorted_by_start(intervals: Iterable[Interval]) -> list[Interval]:
    # ties: shorter first
    return sorted(intervals, key=lambda iv: (iv.start, iv.end_exclusive))


def is_contiguous(intervals: Sequence[Interval]) -> bool:
    """True when every neighbour starts exactly where the previous one ends."""
    return all(
        a.end_exclusive == b.start for a, b in zip(intervals, intervals[1:])
    )


def total_duration(intervals: Iterable[Interval]) -> pd.Timedelta:
    return sum((iv.duration for iv in intervals), pd.Timedelta(0))
