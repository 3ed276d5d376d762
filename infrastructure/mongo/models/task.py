from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.task import Task, TaskPriority, TaskStatus


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskMongo(BaseModel):
    """
    Task document as stored in MongoDB.
    """

    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    status: str
    priority: str
    created_at: datetime
    updated_at: datetime

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        """
        Converts the document into the domain entity.

        Returns:
            Task: the domain entity.
        """
        return Task(
            id=UUID(self.id),
            title=self.title,
            description=self.description,
            status=TaskStatus(self.status),
            priority=TaskPriority(self.priority),
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        """
        Builds a document from a domain entity.

        Args:
            task (Task): the domain entity.

        Returns:
            TaskMongo: the MongoDB model.
        """
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
