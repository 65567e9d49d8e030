from __future__ import annotations

import os
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable

_lock = threading.Lock()
_shared: DefaultPool | None = None


@dataclass(frozen=True)
class DefaultPool:
    """Handle to a long-lived pool shared by every caller in the process.

    Strategies only submit to it; its lifetime belongs to whoever built it.
    """

    executor: Executor
    parallelism: int

    def submit(self, fn: Callable[..., Any], *args: Any) -> Future:
        return self.executor.submit(fn, *args)


def default_pool() -> DefaultPool:
    """Return the process-wide pool, sized to the available processors."""
    global _shared

    with _lock:
        if _shared is None:
            workers = os.cpu_count() or 1
            _shared = DefaultPool(
                ThreadPoolExecutor(
                    max_workers=workers, thread_name_prefix="poolbench-default"
                ),
                workers,
            )
        return _shared
