import logging
from dataclasses import replace
from typing import Iterable
from uuid import UUID

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    TaskRepository backed by a process-local dict.

    Stores and hands out copies, so nothing outside the repository can
    mutate a stored record without going through ``save``.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        super().__init__()
        self._data: dict[UUID, Task] = {}
        for task in tasks:
            self.save(task)

    def list(self) -> list[Task]:
        # Newest inserts first so equal created_at values keep insertion order reversed.
        newest_first = reversed(list(self._data.values()))
        return [
            replace(task)
            for task in sorted(newest_first, key=lambda t: t.created_at, reverse=True)
        ]

    def save(self, task: Task) -> None:
        self._data[task.id] = replace(task)
        logger.debug("Stored task %s (%d in memory)", task.id, len(self._data))

    def get(self, task_id: UUID) -> Task | None:
        task = self._data.get(task_id)
        return None if task is None else replace(task)

    def delete(self, task_id: UUID) -> None:
        self._data.pop(task_id, None)
