from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionReport:
    task_count: int
    elapsed_ms: int

    def render(self) -> str:
        return f"Processed {self.task_count} tasks in {self.elapsed_ms} milliseconds"
