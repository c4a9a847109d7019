from __future__ import annotations
from typing import Final

import pandas as pd

CANONICAL_TZ: Final[str] = "UTC"

# Granularity of the surrounding extraction system: windows are whole hours.
TIME_UNIT: Final[pd.Timedelta] = pd.Timedelta(hours=1)

DEFAULT_CONCURRENCY: Final[int] = 4
DEFAULT_THREAD_PREFIX: Final[str] = "extractwindow"

SQL_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"
SQL_UTC_SUFFIX: Final[str] = "Z"

PLAN_COLS: Final[list[str]] = ["start", "end_exclusive", "end_inclusive", "duration"]
OUTCOME_COLS: Final[list[str]] = [
    "start",
    "end_exclusive",
    "ok",
    "value",
    "error",
    "elapsed_s",
]
PLAN_INDEX_NAME: Final[str] = "chunk"
