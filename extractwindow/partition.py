"""
Split a total extraction window into bounded, independently fetchable chunks.

    total  = [2024-01-01 00:00, 2024-01-02 06:00)   (30h)
    policy = ChunkPolicy(max_chunk_duration=12h)

    chunk 0: [01-01 00:00, 01-01 12:00)
    chunk 1: [01-01 12:00, 01-02 00:00)
    chunk 2: [01-02 00:00, 01-02 06:00)   (clipped final chunk)

Chunk length is always a whole number of policy granules (one hour by
default). The plan depends only on (total, policy).
"""

from __future__ import annotations
import logging

import pandas as pd

from . import exceptions, utils
from .interval import Interval
from .types import ChunkPlan, ChunkPolicy

logger = logging.getLogger(__name__)


def chunk_length(total: Interval, policy: ChunkPolicy) -> pd.Timedelta:
    """
    Resolve the policy into one chunk length for this window.

    - max_chunk_duration caps the length (floored to whole granules)
    - max_chunks sets the shortest length that keeps the count in bounds
    - if both are set the longer length wins (fewer chunks)
    - min_chunk_duration raises the length; it cannot exceed the duration cap
    """
    granule = utils.to_timedelta(policy.granularity)
    duration = total.duration

    dur_granules = None
    count_granules = None
    if policy.max_chunk_duration is not None:
        dur_granules = utils.granules_floor(policy.max_chunk_duration, granule)
    if policy.max_chunks is not None:
        count_granules = utils.ceil_div(duration, granule * policy.max_chunks)

    granules = max(g for g in (dur_granules, count_granules) if g is not None)

    if policy.min_chunk_duration is not None:
        min_granules = utils.granules_ceil(policy.min_chunk_duration, granule)
        if (
            dur_granules is not None
            and min_granules > dur_granules
            and (count_granules is None or count_granules < min_granules)
        ):
            raise exceptions.UnsatisfiablePolicyError(
                f"min_chunk_duration {policy.min_chunk_duration} rounds above "
                f"max_chunk_duration {policy.max_chunk_duration} "
                f"at granularity {granule}."
            )
        granules = max(granules, min_granules)

    if granules == 0:
        raise exceptions.UnsatisfiablePolicyError(
            f"max_chunk_duration {policy.max_chunk_duration} is shorter than "
            f"one granule ({granule})."
        )
    return granule * granules


def partition(total: Interval, policy: ChunkPolicy) -> ChunkPlan:
    """Return an ordered, gap-free plan of chunks exactly covering total."""
    duration = total.duration
    if policy.max_chunks == 1 or (
        policy.max_chunk_duration is not None
        and duration <= policy.max_chunk_duration
    ):
        return [total]

    length = chunk_length(total, policy)
    if length >= duration:
        return [total]

    n = utils.ceil_div(duration, length)
    starts = pd.date_range(start=total.start, periods=n, freq=length)
    # Final chunk is clipped to the window end; n is the ceiling so it is never empty.
    ends = [*starts[1:], total.end_exclusive]
    plan = [Interval(s, e) for s, e in zip(starts, ends)]

    logger.debug(
        "Partitioned %s into %d chunk(s) of %s (final %s)",
        total,
        len(plan),
        length,
        plan[-1].duration,
    )
    return plan
