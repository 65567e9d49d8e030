from enum import Enum


class Strategy(Enum):
    SEQUENTIAL = ("sequential", "Run on sequential manner")
    BOUNDED = ("bounded", "Run futures with a custom executor")
    UNBOUNDED = ("unbounded", "Run using futures")
    DATA_PARALLEL = ("data-parallel", "Run using a parallel map")

    def __init__(self, cli_name: str, label: str) -> None:
        self.cli_name = cli_name
        self.label = label

    @classmethod
    def from_name(cls, name: str) -> "Strategy":
        for strategy in cls:
            if strategy.cli_name == name:
                return strategy
        raise KeyError(name)


DEFAULT_ORDER: tuple[Strategy, ...] = (
    Strategy.SEQUENTIAL,
    Strategy.BOUNDED,
    Strategy.UNBOUNDED,
    Strategy.DATA_PARALLEL,
)


class StrategyError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class InvalidPoolSizeError(StrategyError, ValueError):
    def __init__(self, max_workers: int):
        super().__init__(f"Worker cap must be at least 1, got {max_workers}")
        self.max_workers = max_workers


class TaskExecutionFailed(StrategyError):
    def __init__(self, index: int, cause: BaseException):
        super().__init__(f"Task {index} failed: {cause!r}")
        self.index = index
        self.cause = cause
