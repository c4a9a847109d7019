from __future__ import annotations
import numpy as np

from . import algebra, canon
from .types import DispatchResult, DispatchSummary


def summarise(result: DispatchResult) -> DispatchSummary:
    outcomes = result.outcomes
    elapsed = np.asarray([o.elapsed_s for o in outcomes], dtype=float)

    if len(outcomes):
        window = algebra.span_all(o.interval for o in outcomes)
        start = window.start.isoformat()
        end = window.end_exclusive.isoformat()
        covered = algebra.total_duration(o.interval for o in outcomes)
        covered_hours = float(covered / canon.TIME_UNIT)
    else:
        start = end = None
        covered_hours = 0.0

    has_elapsed = elapsed.size > 0
    return {
        "chunks": len(outcomes),
        "succeeded": len(result.successes),
        "failed": len(result.failures),
        "start": start,
        "end_exclusive": end,
        "covered_hours": covered_hours,
        "elapsed_total_s": float(elapsed.sum()),
        "elapsed_mean_s": float(elapsed.mean()) if has_elapsed else 0.0,
        "elapsed_p95_s": float(np.percentile(elapsed, 95)) if has_elapsed else 0.0,
        "elapsed_max_s": float(elapsed.max()) if has_elapsed else 0.0,
        "failed_chunks": [o.index for o in result.failures],
    }
