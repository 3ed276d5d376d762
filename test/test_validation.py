from uuid import uuid4

import pytest

from core.domain.errors import TaskNotFoundError, ValidationError
from core.domain.models.task import TaskPriority, TaskStatus
from core.domain.validation import (
    parse_task_id,
    validate_changes,
    validate_new_task,
)


def test_new_task_defaults():
    fields = validate_new_task(title="Plan sprint")

    assert fields == {
        "title": "Plan sprint",
        "description": None,
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.MEDIUM,
    }


@pytest.mark.parametrize("title", [None, "", " \t\n", 42])
def test_title_required(title):
    with pytest.raises(ValidationError, match="title required"):
        validate_new_task(title=title)


@pytest.mark.parametrize("status", ["done", "PENDING", "", 1])
def test_invalid_status(status):
    with pytest.raises(ValidationError, match="invalid status"):
        validate_new_task(title="x", status=status)


@pytest.mark.parametrize("priority", ["urgent", "Low", [], 0])
def test_invalid_priority(priority):
    with pytest.raises(ValidationError, match="invalid priority"):
        validate_new_task(title="x", priority=priority)


def test_description_must_be_text():
    with pytest.raises(ValidationError, match="invalid description"):
        validate_new_task(title="x", description=["a"])


def test_changes_keep_absent_keys_absent():
    assert validate_changes({"status": "completed"}) == {
        "status": TaskStatus.COMPLETED
    }
    assert validate_changes({}) == {}


def test_changes_allow_clearing_description():
    assert validate_changes({"description": None}) == {"description": None}


@pytest.mark.parametrize("name", ["id", "created_at", "updated_at", "owner"])
def test_changes_reject_non_mutable_fields(name):
    with pytest.raises(ValidationError, match=f"unknown field: {name}"):
        validate_changes({name: "x"})


def test_parse_task_id():
    task_id = uuid4()

    assert parse_task_id(str(task_id)) == task_id
    assert parse_task_id(task_id) is task_id
    with pytest.raises(TaskNotFoundError):
        parse_task_id("123")
