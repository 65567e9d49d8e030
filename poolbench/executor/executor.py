from __future__ import annotations

from typing import Sequence

from poolbench.task import Task
from poolbench.timing import ExecutionReport, measure

from .pool import DefaultPool, default_pool
from .strategies import (
    run_bounded,
    run_data_parallel,
    run_sequential,
    run_unbounded,
)
from .types import InvalidPoolSizeError, Strategy

DEFAULT_MAX_WORKERS = 1000


class Runner:
    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        pool: DefaultPool | None = None,
    ):
        if max_workers < 1:
            raise InvalidPoolSizeError(max_workers)

        self.max_workers = max_workers
        self._pool = pool

    @property
    def pool(self) -> DefaultPool:
        if self._pool is None:
            self._pool = default_pool()
        return self._pool

    def run(self, strategy: Strategy, batch: Sequence[Task]) -> list[int]:
        match strategy:
            case Strategy.SEQUENTIAL:
                return run_sequential(batch)
            case Strategy.BOUNDED:
                return run_bounded(batch, self.max_workers)
            case Strategy.UNBOUNDED:
                return run_unbounded(batch, self.pool)
            case Strategy.DATA_PARALLEL:
                return run_data_parallel(batch, self.pool)
            case _:
                raise AssertionError("Unreachable")

    def measure(
        self, strategy: Strategy, batch: Sequence[Task]
    ) -> tuple[Sequence[int], ExecutionReport]:
        return measure(lambda: self.run(strategy, batch))
