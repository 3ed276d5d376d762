from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_priority, validate_status


@dataclass(slots=True)
class ListTasksQuery:
    status: str | None = None
    priority: str | None = None


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, query: ListTasksQuery | None = None) -> list[Task]:
        query = query or ListTasksQuery()
        status = None if query.status is None else validate_status(query.status)
        priority = (
            None if query.priority is None else validate_priority(query.priority)
        )

        with self._repository.exclusive():
            tasks = self._repository.list()

        return [
            task
            for task in tasks
            if (status is None or task.status == status)
            and (priority is None or task.priority == priority)
        ]
