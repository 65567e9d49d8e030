from .executor import DEFAULT_MAX_WORKERS, Runner
from .pool import DefaultPool, default_pool
from .strategies import (
    run_bounded,
    run_data_parallel,
    run_sequential,
    run_unbounded,
)
from .types import (
    DEFAULT_ORDER,
    InvalidPoolSizeError,
    Strategy,
    StrategyError,
    TaskExecutionFailed,
)

__all__ = [
    "Runner",
    "DEFAULT_MAX_WORKERS",
    "DefaultPool",
    "default_pool",
    "run_sequential",
    "run_unbounded",
    "run_bounded",
    "run_data_parallel",
    "Strategy",
    "DEFAULT_ORDER",
    "StrategyError",
    "InvalidPoolSizeError",
    "TaskExecutionFailed",
]
