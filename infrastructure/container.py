import logging
import os
from functools import lru_cache

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.task_stats import TaskStatsUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.memory.seed import sample_tasks

logger = logging.getLogger(__name__)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    # One store per process, shared by every request.
    orm = os.getenv("ORM", "memory").lower()
    logger.info("Using %s task repository", orm)

    if orm == "mongo":
        from infrastructure.mongo.repository.task_repository import (
            MongoTaskRepository,
        )

        return MongoTaskRepository()
    elif orm == "peewee":
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )

        return PeeweeTaskRepository()
    elif orm != "memory":
        raise ValueError(f"Unknown ORM backend: {orm}")

    seed = _as_bool(os.getenv("SEED_SAMPLE_TASKS", "false"))
    return InMemoryTaskRepository(sample_tasks() if seed else ())


def get_create_task_use_case() -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=get_task_repository())


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(repository=get_task_repository())


def get_get_task_use_case() -> GetTaskUseCase:
    return GetTaskUseCase(repository=get_task_repository())


def get_update_task_use_case() -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=get_task_repository())


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository())


def get_task_stats_use_case() -> TaskStatsUseCase:
    return TaskStatsUseCase(repository=get_task_repository())
