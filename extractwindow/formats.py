from __future__ import annotations

from typing import Sequence

import pandas as pd

from . import canon
from .interval import Interval
from .types import DispatchResult


def plan_to_frame(plan: Sequence[Interval]) -> pd.DataFrame:
    """
    Tabulate a chunk plan, one row per chunk.

        index:   'chunk' (0..n-1, plan order)
        columns: ['start', 'end_exclusive', 'end_inclusive', 'duration']
    """
    df = pd.DataFrame(
        {
            "start": pd.DatetimeIndex([iv.start for iv in plan], tz=canon.CANONICAL_TZ),
            "end_exclusive": pd.DatetimeIndex(
                [iv.end_exclusive for iv in plan], tz=canon.CANONICAL_TZ
            ),
            "end_inclusive": pd.DatetimeIndex(
                [iv.end_inclusive for iv in plan], tz=canon.CANONICAL_TZ
            ),
            "duration": pd.TimedeltaIndex([iv.duration for iv in plan]),
        },
        columns=canon.PLAN_COLS,
    )
    df.index.name = canon.PLAN_INDEX_NAME
    return df


def outcomes_to_frame(result: DispatchResult) -> pd.DataFrame:
    """One row per chunk outcome; 'error' holds the message or None."""
    rows = [
        {
            "start": o.interval.start,
            "end_exclusive": o.interval.end_exclusive,
            "ok": o.ok,
            "value": o.value,
            "error": None if o.error is None else str(o.error.__cause__),
            "elapsed_s": float(o.elapsed_s),
        }
        for o in result.outcomes
    ]
    df = pd.DataFrame(rows, columns=canon.OUTCOME_COLS)
    df.index.name = canon.PLAN_INDEX_NAME
    return df


def plan_to_records(plan: Sequence[Interval]) -> list[dict[str, str]]:
    return [
        {
            "start": iv.start.isoformat(),
            "end_exclusive": iv.end_exclusive.isoformat(),
            "end_inclusive": iv.end_inclusive.isoformat(),
        }
        for iv in plan
    ]
