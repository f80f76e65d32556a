"""MongoDB connection handle for the exercise tracker."""

from typing import Optional
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS = "users"
EXERCISES = "exercises"
LOGS = "logs"


class Database:
    """Owns the Motor client and exposes the three collections."""

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None):
        self.uri = uri or settings.mongo_uri
        self.db_name = db_name or settings.mongo_db_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Create the client and select the database named in the URI."""
        self.client = AsyncIOMotorClient(self.uri)
        self.database = self.client.get_default_database(default=self.db_name)
        logger.info(f"Connected to MongoDB database '{self.database.name}'")

    async def close(self) -> None:
        """Close the client if one was created."""
        if self.client:
            self.client.close()
            self.client = None
            self.database = None
            logger.info("Disconnected from MongoDB")

    def _collection(self, name: str) -> AsyncIOMotorCollection:
        if self.database is None:
            raise RuntimeError("Database is not connected")
        return self.database[name]

    @property
    def users(self) -> AsyncIOMotorCollection:
        return self._collection(USERS)

    @property
    def exercises(self) -> AsyncIOMotorCollection:
        return self._collection(EXERCISES)

    @property
    def logs(self) -> AsyncIOMotorCollection:
        return self._collection(LOGS)


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle created at startup."""
    return request.app.state.database
