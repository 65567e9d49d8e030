class TaskError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class InvalidTaskError(TaskError, ValueError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class ExecutionInterrupted(TaskError):
    def __init__(self, seconds: int):
        super().__init__(f"Interrupted while waiting {seconds}s")
        self.seconds = seconds
