from typing import Any
from uuid import UUID

from pymongo import DESCENDING
from pymongo.collection import Collection

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import get_db


class MongoTaskRepository(TaskRepository):
    """
    TaskRepository implementation on MongoDB (synchronous).
    """

    def __init__(self) -> None:
        super().__init__()
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tasks

    def save(self, task: Task) -> None:
        """
        Inserts or replaces a task.

        Args:
            task (Task): the task to store.
        """
        task_mongo = TaskMongo.from_domain(task)
        task_dict = task_mongo.model_dump(by_alias=True)

        self.collection.update_one(
            {"_id": task_dict["_id"]}, {"$set": task_dict}, upsert=True
        )

    def get(self, task_id: UUID) -> Task | None:
        """
        Fetches a task by id.

        Args:
            task_id (UUID): the task id.

        Returns:
            Task | None: the task, or None when it does not exist.
        """
        doc = self.collection.find_one({"_id": str(task_id)})
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def list(self) -> list[Task]:
        """
        Lists every task, newest first.

        Returns:
            list[Task]: all stored tasks.
        """
        docs = self.collection.find().sort("created_at", DESCENDING)
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def delete(self, task_id: UUID) -> None:
        """
        Deletes a task by id.

        Args:
            task_id (UUID): id of the task to delete.
        """
        self.collection.delete_one({"_id": str(task_id)})
