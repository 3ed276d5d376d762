import logging
from dataclasses import dataclass, field, replace
from typing import Any
from uuid import UUID

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, utc_now
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_changes

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    # Only the keys present here are applied; a missing key leaves the
    # stored value untouched, an explicit None clears the description.
    changes: dict[str, Any] = field(default_factory=dict)


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID, cmd: UpdateTaskCommand) -> Task:
        changes = validate_changes(cmd.changes)

        with self._repository.exclusive():
            current = self._repository.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)

            updated = replace(
                current,
                **changes,
                updated_at=max(utc_now(), current.updated_at),
            )
            self._repository.save(updated)

        logger.info("Task %s updated (%s)", task_id, ", ".join(changes) or "no fields")
        return updated
