"""
Schema for the ``tasks`` table.

Creates the single table and, on PostgreSQL, the trigger that refreshes
``updated_at`` on row updates that did not set it themselves.
"""

import logging

from peewee import Database, PostgresqlDatabase

from infrastructure.peewee.model.models import TaskModel

logger = logging.getLogger(__name__)

UPDATED_AT_FUNCTION = """
CREATE OR REPLACE FUNCTION update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
  IF NEW.updated_at IS NOT DISTINCT FROM OLD.updated_at THEN
    NEW.updated_at = now() AT TIME ZONE 'utc';
  END IF;
  RETURN NEW;
END;
$$ LANGUAGE plpgsql
"""

UPDATED_AT_TRIGGER = """
CREATE TRIGGER update_tasks_updated_at
BEFORE UPDATE ON tasks
FOR EACH ROW
EXECUTE FUNCTION update_updated_at_column()
"""


def create_schema(database: Database) -> None:
    """
    Creates the table if it does not exist.

    Args:
        database: Peewee database to create the schema in.
    """
    with database.atomic():
        database.create_tables([TaskModel], safe=True)
        if isinstance(database, PostgresqlDatabase):
            database.execute_sql(UPDATED_AT_FUNCTION)
            database.execute_sql("DROP TRIGGER IF EXISTS update_tasks_updated_at ON tasks")
            database.execute_sql(UPDATED_AT_TRIGGER)
            logger.info("Installed updated_at trigger on tasks")
