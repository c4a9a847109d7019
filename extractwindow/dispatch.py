"""
Run a caller-supplied operation over every chunk of a plan.

    plan      = partition(total, policy)
    result    = Dispatcher().run(plan, 8, extract_rows)
    result.ok                       # every chunk succeeded
    result.failed_plan()            # intervals to hand back for another pass

Chunks run on a bounded thread pool. A failing chunk is recorded as a
ChunkExecutionError in its own outcome and never stops its siblings. Outcomes
are returned in plan order, whatever order they completed in.
"""

from __future__ import annotations
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional, Sequence

from . import validate
from .config import DispatchConfig, default_config
from .exceptions import ChunkExecutionError
from .interval import Interval
from .types import ChunkOutcome, DispatchResult, PerChunk

logger = logging.getLogger(__name__)


def _run_one(index: int, interval: Interval, per_chunk: PerChunk) -> ChunkOutcome:
    t0 = time.perf_counter()
    try:
        value = per_chunk(interval)
    except Exception as exc:
        return ChunkOutcome(
            index=index,
            interval=interval,
            error=ChunkExecutionError(index, interval, exc),
            elapsed_s=time.perf_counter() - t0,
        )
    return ChunkOutcome(
        index=index,
        interval=interval,
        value=value,
        elapsed_s=time.perf_counter() - t0,
    )


class Dispatcher:
    """Bounded-concurrency executor for per-chunk extraction callbacks."""

    def __init__(self, config: Optional[DispatchConfig] = None):
        self.config = config or default_config()

    def run(
        self,
        plan: Sequence[Interval],
        concurrency: int,
        per_chunk: PerChunk,
    ) -> DispatchResult:
        """
        Execute per_chunk once per interval in plan, at most `concurrency` at a time.

        Never raises for chunk failures; inspect the returned DispatchResult.
        """
        validate.validate_concurrency(concurrency)
        if not plan:
            return DispatchResult([])

        workers = min(concurrency, len(plan))
        logger.info("Dispatching %d chunk(s) on %d worker(s)", len(plan), workers)

        outcomes: list[Optional[ChunkOutcome]] = [None] * len(plan)
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix=self.config.thread_name_prefix
        ) as pool:
            futures = {
                pool.submit(_run_one, i, interval, per_chunk): i
                for i, interval in enumerate(plan)
            }
            for future in as_completed(futures):
                outcome = future.result()
                outcomes[futures[future]] = outcome
                if not outcome.ok and self.config.log_failures:
                    logger.warning("%s", outcome.error)
                else:
                    logger.debug(
                        "Chunk %d %s done in %.3fs",
                        outcome.index,
                        outcome.interval,
                        outcome.elapsed_s,
                    )

        result = DispatchResult([o for o in outcomes if o is not None])
        logger.info(
            "Dispatch finished: %d succeeded, %d failed",
            len(result.successes),
            len(result.failures),
        )
        return result


def dispatch(
    plan: Sequence[Interval],
    per_chunk: PerChunk,
    *,
    config: Optional[DispatchConfig] = None,
) -> DispatchResult:
    """Run per_chunk over plan using the concurrency from config."""
    cfg = config or default_config()
    return Dispatcher(cfg).run(plan, cfg.concurrency, per_chunk)
