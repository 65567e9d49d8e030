from .harness import measure
from .types import ExecutionReport

__all__ = ["measure", "ExecutionReport"]
