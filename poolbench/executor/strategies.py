"""The four ways of running a batch.

Every function returns one result per task, in batch order. The concurrent
ones wait for every task before reporting the first failure by position.
"""

from __future__ import annotations

import itertools
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Sequence

from poolbench.log import get_logger
from poolbench.task import Task

from .pool import DefaultPool
from .types import InvalidPoolSizeError, TaskExecutionFailed

BOUNDED_THREAD_PREFIX = "poolbench-bounded"

logger = get_logger(__name__)


def run_sequential(batch: Sequence[Task]) -> list[int]:
    logger.debug("strategy_started", strategy="sequential", tasks=len(batch))
    return [task.calculate() for task in batch]


def run_unbounded(batch: Sequence[Task], pool: DefaultPool) -> list[int]:
    logger.debug(
        "strategy_started",
        strategy="unbounded",
        tasks=len(batch),
        workers=pool.parallelism,
    )
    futures = [pool.submit(task.calculate) for task in batch]
    return _await_all(futures)


def run_bounded(batch: Sequence[Task], max_workers: int) -> list[int]:
    if max_workers < 1:
        raise InvalidPoolSizeError(max_workers)

    if len(batch) == 0:
        return []

    workers = min(len(batch), max_workers)
    logger.debug(
        "strategy_started", strategy="bounded", tasks=len(batch), workers=workers
    )

    with ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix=BOUNDED_THREAD_PREFIX
    ) as executor:
        futures = [executor.submit(task.calculate) for task in batch]
        return _await_all(futures)


def run_data_parallel(batch: Sequence[Task], pool: DefaultPool) -> list[int]:
    results: list[int] = [0] * len(batch)
    errors: dict[int, Exception] = {}
    cursor = itertools.count()
    lock = threading.Lock()

    def drain() -> None:
        while True:
            with lock:
                index = next(cursor)
            if index >= len(batch):
                return
            try:
                results[index] = batch[index].calculate()
            except Exception as exc:
                errors[index] = exc

    # The calling thread is one of the workers.
    helpers = min(pool.parallelism, len(batch)) - 1
    logger.debug(
        "strategy_started",
        strategy="data-parallel",
        tasks=len(batch),
        workers=max(helpers, 0) + 1,
    )

    futures = [pool.submit(drain) for _ in range(helpers)]
    drain()
    wait(futures)
    for future in futures:
        future.result()

    if errors:
        index = min(errors)
        raise TaskExecutionFailed(index, errors[index]) from errors[index]

    return results


def _await_all(futures: list[Future]) -> list[int]:
    wait(futures)

    results = []
    for index, future in enumerate(futures):
        exc = future.exception()
        if exc is not None:
            raise TaskExecutionFailed(index, exc) from exc
        results.append(future.result())

    return results
