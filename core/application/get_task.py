from uuid import UUID

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID) -> Task:
        with self._repository.exclusive():
            task = self._repository.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
