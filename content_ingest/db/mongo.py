"""
MongoDB connection lifecycle.

One AsyncMongoClient is created at startup and shared by every repository.
The client connects lazily, so constructing it never blocks; the first
operation (or ``ping``) performs server selection.
"""

from typing import Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from content_ingest.core.exceptions import RepositoryError
from content_ingest.observability.logging import get_logger

logger = get_logger(__name__)


class Collections:
    """Collection names, kept compatible with existing deployments."""

    JOB_DESCRIPTIONS = "jobdescriptions"
    SCHOLARSHIPS = "scholarships"
    BLOGS = "blogs"
    NEWS = "news"
    TECHNICAL = "technicals"
    OTHERS = "others"
    PAGE_CONTENTS = "pagecontents"
    ADMISSIONS = "admissions"
    USERS = "users"
    FILES = "files"


class MongoConnection:
    """
    Owns the Mongo client for the lifetime of the application.

    Attributes:
        url: Connection string.
        database_name: Name of the database holding all collections.
    """

    def __init__(self, url: str, database_name: str, timeout_ms: int = 5000) -> None:
        self.url = url
        self.database_name = database_name
        self._timeout_ms = timeout_ms
        self._client: Optional[AsyncMongoClient] = None

    def connect(self) -> AsyncDatabase:
        """Create the client (idempotent) and return the database handle."""
        if self._client is None:
            self._client = AsyncMongoClient(
                self.url,
                serverSelectionTimeoutMS=self._timeout_ms,
                tz_aware=True,
            )
            logger.info("mongo client created", database=self.database_name)
        return self._client[self.database_name]

    @property
    def database(self) -> AsyncDatabase:
        if self._client is None:
            raise RepositoryError("Database connection has not been initialized")
        return self._client[self.database_name]

    async def ping(self) -> bool:
        """Return True when the server answers a ping."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("mongo ping failed", error=str(e))
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("mongo client closed")


async def ensure_indexes(database: AsyncDatabase) -> None:
    """
    Create the indexes the services rely on.

    Unique indexes back the duplicate checks for page URLs and user emails.
    """
    await database[Collections.PAGE_CONTENTS].create_index(
        [("url", ASCENDING)], unique=True
    )
    await database[Collections.USERS].create_index([("email", ASCENDING)], unique=True)
    await database[Collections.FILES].create_index([("user_id", ASCENDING)])
    await database[Collections.NEWS].create_index(
        [("is_breaking", ASCENDING), ("created_at", ASCENDING)]
    )
    await database[Collections.ADMISSIONS].create_index(
        [("application_deadline", ASCENDING)]
    )
