from uuid import uuid4

from core.domain.models.task import Task, TaskPriority, TaskStatus, utc_now


def sample_tasks() -> list[Task]:
    """Two demo tasks for a fresh in-memory store."""
    now = utc_now()
    return [
        Task(
            id=uuid4(),
            title="Plan sprint",
            description="List the main tasks for the week",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
            created_at=now,
            updated_at=now,
        ),
        Task(
            id=uuid4(),
            title="Set up monitoring",
            description="Create a Grafana dashboard",
            status=TaskStatus.PENDING,
            priority=TaskPriority.MEDIUM,
            created_at=now,
            updated_at=now,
        ),
    ]
