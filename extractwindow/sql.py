"""SQL literal and predicate helpers for restricting a query to one chunk."""

from __future__ import annotations
from typing import Iterable

from . import canon, utils
from .interval import Interval
from .utils import TimestampLike


def format_timestamp(ts: TimestampLike) -> str:
    """ISO-8601 UTC literal, e.g. '2024-01-05T12:00:00Z' (microseconds kept when present)."""
    t = utils.to_utc_timestamp(ts)
    out = t.strftime(canon.SQL_TIMESTAMP_FORMAT)
    if t.microsecond:
        out += f".{t.microsecond:06d}"
    return out + canon.SQL_UTC_SUFFIX


def where_clause(clauses: Iterable[str], *extra: str) -> str:
    return " AND ".join(c for c in (*clauses, *extra) if c)


def interval_predicate(column: str, interval: Interval, inclusive: bool = False) -> str:
    """
    Predicate selecting rows of `column` inside interval.

    Half-open by default; inclusive=True uses BETWEEN with end_inclusive,
    which is exact only for hour-granular data.
    """
    start = format_timestamp(interval.start)
    if inclusive:
        end = format_timestamp(interval.end_inclusive)
        return f"{column} BETWEEN '{start}' AND '{end}'"
    end = format_timestamp(interval.end_exclusive)
    return where_clause([f"{column} >= '{start}'", f"{column} < '{end}'"])
