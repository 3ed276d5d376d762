import logging
from datetime import datetime, timezone
from uuid import UUID
from typing import List
from core.domain.models.task import Task, TaskPriority, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.schema import create_schema
from infrastructure.peewee.session.db import db

logger = logging.getLogger(__name__)


def _to_naive_utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _to_aware_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_domain(row: TaskModel) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        status=TaskStatus(row.status),
        priority=TaskPriority(row.priority),
        created_at=_to_aware_utc(row.created_at),
        updated_at=_to_aware_utc(row.updated_at),
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        super().__init__()
        # Tables are created on init; there is no separate migration step.
        db.connect(reuse_if_open=True)
        create_schema(db)
        logger.info("PeeweeTaskRepository ready on %s", type(db).__name__)

    def save(self, task: Task) -> None:
        values = dict(
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value,
            created_at=_to_naive_utc(task.created_at),
            updated_at=_to_naive_utc(task.updated_at),
        )
        with db.atomic():
            updated = (
                TaskModel.update(**values).where(TaskModel.id == task.id).execute()
            )
            if not updated:
                TaskModel.create(id=task.id, **values)

    def get(self, task_id: UUID) -> Task | None:
        try:
            return _to_domain(TaskModel.get(TaskModel.id == task_id))
        except TaskModel.DoesNotExist:
            return None

    def list(self) -> List[Task]:
        query = TaskModel.select().order_by(TaskModel.created_at.desc())
        return [_to_domain(row) for row in query]

    def delete(self, task_id: UUID) -> None:
        query = TaskModel.delete().where(TaskModel.id == task_id)
        query.execute()
