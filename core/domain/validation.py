"""
Input validation for task payloads.

Every function here either returns a normalized value or raises
``ValidationError``. Nothing in this module touches a repository, so a
rejected payload can never leave partial state behind.
"""

from typing import Any, Mapping
from uuid import UUID

from core.domain.errors import TaskNotFoundError, ValidationError
from core.domain.models.task import TaskPriority, TaskStatus

MUTABLE_FIELDS = ("title", "description", "status", "priority")


def validate_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("title required")
    return value.strip()


def validate_description(value: Any) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValidationError("invalid description")
    return value


def validate_status(value: Any) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        raise ValidationError("invalid status") from None


def validate_priority(value: Any) -> TaskPriority:
    try:
        return TaskPriority(value)
    except ValueError:
        raise ValidationError("invalid priority") from None


_VALIDATORS = {
    "title": validate_title,
    "description": validate_description,
    "status": validate_status,
    "priority": validate_priority,
}


def validate_new_task(
    title: Any,
    description: Any = None,
    status: Any = None,
    priority: Any = None,
) -> dict[str, Any]:
    """
    Validates a creation payload and fills in defaults.

    ``None`` for status or priority means "not provided" and resolves to
    the default value (pending / medium).

    Returns:
        dict with the four mutable fields, normalized.
    """
    return {
        "title": validate_title(title),
        "description": validate_description(description),
        "status": TaskStatus.PENDING if status is None else validate_status(status),
        "priority": (
            TaskPriority.MEDIUM if priority is None else validate_priority(priority)
        ),
    }


def validate_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validates a partial update payload.

    Only the keys present in ``changes`` are validated and returned; absent
    keys stay absent so the caller merges nothing for them. Keys outside
    ``MUTABLE_FIELDS`` are rejected.
    """
    validated: dict[str, Any] = {}
    for name, value in changes.items():
        validator = _VALIDATORS.get(name)
        if validator is None:
            raise ValidationError(f"unknown field: {name}")
        validated[name] = validator(value)
    return validated


def parse_task_id(raw: Any) -> UUID:
    """Ids are opaque to callers: anything that is not a UUID simply doesn't exist."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        raise TaskNotFoundError(raw) from None
