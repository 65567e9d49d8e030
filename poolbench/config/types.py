from dataclasses import dataclass

from poolbench.executor import DEFAULT_MAX_WORKERS, DEFAULT_ORDER, Strategy


@dataclass
class BenchConfig:
    task_count: int = 10
    task_seconds: int = 1
    max_workers: int = DEFAULT_MAX_WORKERS
    strategies: tuple[Strategy, ...] = DEFAULT_ORDER


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
