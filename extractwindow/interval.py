from __future__ import annotations
from dataclasses import dataclass

import pandas as pd

from . import canon, exceptions, utils
from .utils import TimestampLike


@dataclass(frozen=True)
class Interval:
    """
    Half-open UTC time range [start, end_exclusive).

    Both bounds are stored as tz-aware UTC pd.Timestamp values so that
    comparisons are well defined whatever zone the caller worked in.
    """

    start: pd.Timestamp
    end_exclusive: pd.Timestamp

    def __post_init__(self) -> None:
        start = utils.to_utc_timestamp(self.start)
        end = utils.to_utc_timestamp(self.end_exclusive)
        exceptions.require(
            start < end,
            "Start date must be before end date",
            exceptions.InvalidRangeError,
        )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end_exclusive", end)

    @classmethod
    def truncated(cls, start: TimestampLike, end_exclusive: TimestampLike) -> Interval:
        """Build an interval with both bounds floored to whole time units."""
        return cls(utils.floor_to_unit(start), utils.floor_to_unit(end_exclusive))

    @property
    def end_inclusive(self) -> pd.Timestamp:
        return self.end_exclusive - canon.TIME_UNIT

    @property
    def duration(self) -> pd.Timedelta:
        return self.end_exclusive - self.start

    def span(self, other: Interval) -> Interval:
        """
        Bounding union: the smallest interval covering both.

        Defined for any pair. Disjoint inputs yield an interval that also
        covers the gap between them.
        """
        return Interval(
            min(self.start, other.start),
            max(self.end_exclusive, other.end_exclusive),
        )

    def overlaps(self, other: Interval) -> bool:
        return self.start < other.end_exclusive and other.start < self.end_exclusive

    def is_adjacent(self, other: Interval) -> bool:
        return (
            self.end_exclusive == other.start or other.end_exclusive == self.start
        )

    def contains(self, instant: TimestampLike) -> bool:
        ts = utils.to_utc_timestamp(instant)
        return self.start <= ts < self.end_exclusive

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end_exclusive.isoformat()})"
