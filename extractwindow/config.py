from __future__ import annotations

from dataclasses import dataclass

from . import canon


@dataclass
class DispatchConfig:
    # Upper bound on chunk callbacks running at once
    concurrency: int = canon.DEFAULT_CONCURRENCY
    thread_name_prefix: str = canon.DEFAULT_THREAD_PREFIX
    # Log each failed chunk at WARNING as it completes
    log_failures: bool = True


def default_config() -> DispatchConfig:
    return DispatchConfig()
