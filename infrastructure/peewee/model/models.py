from peewee import Check, Model, CharField, DateTimeField, TextField, UUIDField
from infrastructure.peewee.session.db import db

STATUS_VALUES = ("pending", "in_progress", "completed")
PRIORITY_VALUES = ("low", "medium", "high")


def _in(column: str, values: tuple[str, ...]) -> Check:
    allowed = ", ".join(f"'{v}'" for v in values)
    return Check(f"{column} IN ({allowed})")


class TaskModel(Model):
    id = UUIDField(primary_key=True)
    title = TextField()
    description = TextField(null=True)
    status = CharField(default="pending", constraints=[_in("status", STATUS_VALUES)])
    priority = CharField(
        default="medium", constraints=[_in("priority", PRIORITY_VALUES)]
    )
    # Naive UTC; the repository re-attaches the tzinfo on the way out.
    created_at = DateTimeField()
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
