import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Returns the shared MongoDB client.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri, tz_aware=True)
    return _client


def get_db() -> Database[Any]:
    """
    Returns the MongoDB database.

    Returns:
        Database: the configured database.
    """
    client = get_client()
    db_name = os.getenv("MONGO_DB_NAME", "task_tracker")
    return client[db_name]
