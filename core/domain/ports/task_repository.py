import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from core.domain.models.task import Task


class TaskRepository(ABC):
    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """Serializes a whole use case (validate, check, mutate) against this store."""
        with self._lock:
            yield

    @abstractmethod
    def list(self) -> list[Task]:
        """All tasks, newest ``created_at`` first."""
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: UUID) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: UUID) -> None:
        raise NotImplementedError
