from __future__ import annotations

import time
from typing import Callable, Sequence

from .types import ExecutionReport


def measure(
    call: Callable[[], Sequence[int]],
    *,
    clock: Callable[[], float] = time.monotonic,
) -> tuple[Sequence[int], ExecutionReport]:
    start = clock()
    result = call()
    elapsed = clock() - start

    return result, ExecutionReport(len(result), int(elapsed * 1000))
