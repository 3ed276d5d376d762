import logging
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from core.domain.models.task import Task, utc_now
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_new_task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    # Untyped; every value is checked by the validation layer.
    title: Any = None
    description: Any = None
    status: Any = None
    priority: Any = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        fields = validate_new_task(
            title=cmd.title,
            description=cmd.description,
            status=cmd.status,
            priority=cmd.priority,
        )
        now = utc_now()
        with self._repository.exclusive():
            task = Task(id=uuid4(), created_at=now, updated_at=now, **fields)
            self._repository.save(task)
        logger.info("Task %s created", task.id)
        return task
