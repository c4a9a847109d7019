# extractwindow/utils.py
from __future__ import annotations
from datetime import datetime, timedelta
from typing import Union

import pandas as pd

from . import canon

TimestampLike = Union[pd.Timestamp, datetime, str]
TimedeltaLike = Union[pd.Timedelta, timedelta, str]


def to_utc_timestamp(value: TimestampLike) -> pd.Timestamp:
    """
    Normalise a timestamp-like value to a tz-aware UTC pd.Timestamp.

    Naive values are taken to be UTC already; aware values are converted.
    """
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError(f"Cannot interpret {value!r} as a timestamp.")
    if ts.tz is None:
        return ts.tz_localize(canon.CANONICAL_TZ)
    return ts.tz_convert(canon.CANONICAL_TZ)


def to_timedelta(value: TimedeltaLike) -> pd.Timedelta:
    td = pd.Timedelta(value)
    if td is pd.NaT:
        raise ValueError(f"Cannot interpret {value!r} as a duration.")
    return td


def floor_to_unit(ts: TimestampLike, unit: pd.Timedelta = canon.TIME_UNIT) -> pd.Timestamp:
    """Truncate a timestamp to the system granularity (whole hours by default)."""
    return to_utc_timestamp(ts).floor(unit)


def ceil_div(numerator: pd.Timedelta, denominator: pd.Timedelta) -> int:
    """Number of `denominator` steps needed to cover `numerator`."""
    if denominator <= pd.Timedelta(0):
        raise ValueError("denominator must be a positive duration")
    return int(-(-numerator // denominator))


def granules_floor(duration: TimedeltaLike, granule: pd.Timedelta) -> int:
    """Whole granules that fit inside duration."""
    return int(to_timedelta(duration) // granule)


def granules_ceil(duration: TimedeltaLike, granule: pd.Timedelta) -> int:
    """Whole granules needed to reach at least duration."""
    return ceil_div(to_timedelta(duration), granule)
