from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    task_stats_use_case,
    update_task_use_case,
)
from backend_fastapi.api.envelope import Envelope, ok
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksQuery, ListTasksUseCase
from core.application.task_stats import TaskStats, TaskStatsUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import Task
from core.domain.validation import parse_task_id

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=Envelope[Task],
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(
    cmd: CreateTaskCommand,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> Envelope[Task]:
    """
    Creates a new task.

    - **title**: required, non-blank.
    - **description**: optional.
    - **status**: pending (default), in_progress or completed.
    - **priority**: low, medium (default) or high.
    """
    return ok(use_case.execute(cmd))


@router.get(
    "",
    response_model=Envelope[list[Task]],
    summary="List tasks",
)
def list_tasks(
    status_filter: str | None = Query(None, alias="status"),
    priority_filter: str | None = Query(None, alias="priority"),
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> Envelope[list[Task]]:
    """
    Returns every task, newest first, optionally filtered by status and/or priority.
    """
    query = ListTasksQuery(status=status_filter, priority=priority_filter)
    return ok(use_case.execute(query))


@router.get(
    "/stats",
    response_model=Envelope[TaskStats],
    summary="Count tasks per status",
)
def task_stats(
    use_case: TaskStatsUseCase = Depends(task_stats_use_case),
) -> Envelope[TaskStats]:
    return ok(use_case.execute())


@router.get(
    "/{task_id}",
    response_model=Envelope[Task],
    summary="Get a task",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> Envelope[Task]:
    return ok(use_case.execute(parse_task_id(task_id)))


@router.api_route(
    "/{task_id}",
    methods=["PUT", "PATCH"],
    response_model=Envelope[Task],
    summary="Update a task",
)
def update_task(
    task_id: str,
    changes: dict[str, Any] = Body(...),
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Envelope[Task]:
    """
    Applies the given fields to an existing task.

    Fields left out of the body keep their current value; sending
    `"description": null` clears the description.
    """
    return ok(use_case.execute(parse_task_id(task_id), UpdateTaskCommand(changes)))


@router.delete(
    "/{task_id}",
    response_model=Envelope[Task],
    summary="Delete a task",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> Envelope[Task]:
    """
    Deletes a task and returns the removed record.
    """
    return ok(use_case.execute(DeleteTaskCommand(id=parse_task_id(task_id))))
