from . import (
    canon,
    exceptions,
    utils,
    interval,
    algebra,
    types,
    validate,
    partition,
    config,
    dispatch,
    sql,
    formats,
    summary,
)
from .interval import Interval
from .types import ChunkPolicy, DispatchResult
from .dispatch import Dispatcher

__all__ = [
    "canon",
    "exceptions",
    "utils",
    "interval",
    "algebra",
    "types",
    "validate",
    "partition",
    "config",
    "dispatch",
    "sql",
    "formats",
    "summary",
    "Interval",
    "ChunkPolicy",
    "DispatchResult",
    "Dispatcher",
]
