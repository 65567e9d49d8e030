from .task import Task, make_batch
from .types import ExecutionInterrupted, InvalidTaskError, TaskError

__all__ = [
    "Task",
    "make_batch",
    "TaskError",
    "InvalidTaskError",
    "ExecutionInterrupted",
]
