from __future__ import annotations
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, List, Optional, TypedDict

from pydantic import BaseModel, Field, field_validator, model_validator

from . import canon
from .exceptions import ChunkExecutionError, DispatchFailedError
from .interval import Interval

# Ordered, contiguous, gap-free cover of a total extraction window.
ChunkPlan = List[Interval]

PerChunk = Callable[[Interval], Any]


class ChunkPolicy(BaseModel):
    """
    How a total window is cut into chunks.

    At least one of max_chunk_duration / max_chunks must be set. When both are
    set and disagree, the bound giving fewer, larger chunks wins.
    """

    max_chunk_duration: Optional[timedelta] = None
    max_chunks: Optional[int] = Field(default=None, ge=1)
    min_chunk_duration: Optional[timedelta] = None
    granularity: timedelta = canon.TIME_UNIT
    model_config = {"frozen": True}

    @field_validator(
        "max_chunk_duration", "min_chunk_duration", "granularity", mode="after"
    )
    @classmethod
    def _positive(cls, v: Optional[timedelta]) -> Optional[timedelta]:
        if v is not None and v <= timedelta(0):
            raise ValueError("durations must be strictly positive")
        return v

    @model_validator(mode="after")
    def _has_upper_bound(self) -> ChunkPolicy:
        if self.max_chunk_duration is None and self.max_chunks is None:
            raise ValueError("set at least one of max_chunk_duration or max_chunks")
        return self


@dataclass(frozen=True)
class ChunkOutcome:
    index: int
    interval: Interval
    value: Any = None
    error: Optional[ChunkExecutionError] = None
    elapsed_s: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DispatchResult:
    """Per-chunk outcomes of one dispatcher run, in plan order."""

    outcomes: List[ChunkOutcome] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self):
        return iter(self.outcomes)

    def __getitem__(self, i: int) -> ChunkOutcome:
        return self.outcomes[i]

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def successes(self) -> List[ChunkOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failures(self) -> List[ChunkOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def values(self) -> List[Any]:
        """Values of successful chunks, in plan order."""
        return [o.value for o in self.successes]

    @property
    def errors(self) -> List[ChunkExecutionError]:
        return [o.error for o in self.failures if o.error is not None]

    def failed_plan(self) -> ChunkPlan:
        """Intervals to hand back to the dispatcher for a retry pass."""
        return [o.interval for o in self.failures]

    def raise_for_failures(self) -> None:
        if not self.ok:
            raise DispatchFailedError(self.errors)


class DispatchSummary(TypedDict):
    chunks: int
    succeeded: int
    failed: int
    start: Optional[str]
    end_exclusive: Optional[str]
    covered_hours: float
    elapsed_total_s: float
    elapsed_mean_s: float
    elapsed_p95_s: float
    elapsed_max_s: float
    failed_chunks: List[int]
