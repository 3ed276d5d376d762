from collections import Counter
from dataclasses import dataclass

from core.domain.models.task import TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class TaskStats:
    total: int
    pending: int
    in_progress: int
    completed: int


class TaskStatsUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> TaskStats:
        with self._repository.exclusive():
            tasks = self._repository.list()

        counts = Counter(task.status for task in tasks)
        return TaskStats(
            total=len(tasks),
            pending=counts[TaskStatus.PENDING],
            in_progress=counts[TaskStatus.IN_PROGRESS],
            completed=counts[TaskStatus.COMPLETED],
        )
