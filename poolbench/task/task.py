from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from .types import ExecutionInterrupted, InvalidTaskError


@dataclass(frozen=True)
class Task:
    """Blocking stand-in for a slow external call."""

    seconds: int
    sleep: Callable[[float], None] = field(
        default=time.sleep, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise InvalidTaskError(
                f"Task duration must be an integer, got {type(self.seconds)}"
            )

        if self.seconds < 0:
            raise InvalidTaskError(
                f"Task duration can't be negative: {self.seconds}"
            )

    def calculate(self) -> int:
        try:
            self.sleep(self.seconds)
        except InterruptedError as exc:
            raise ExecutionInterrupted(self.seconds) from exc

        return self.seconds


def make_batch(
    count: int,
    seconds: int,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> list[Task]:
    if count < 0:
        raise InvalidTaskError(f"Task count can't be negative: {count}")

    return [Task(seconds, sleep) for _ in range(count)]
