class TaskError(Exception):
    """Base class for errors raised by the task core."""


class ValidationError(TaskError):
    """Input rejected before any mutation was applied."""


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: object = None) -> None:
        super().__init__("task not found")
        self.task_id = task_id
