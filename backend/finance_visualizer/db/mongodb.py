from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from finance_visualizer.core.config import settings
from finance_visualizer.core.exceptions import StorageUnavailable
from finance_visualizer.core.logging import get_logger

logger = get_logger(__name__)


class MongoDB:
    client: Optional[AsyncIOMotorClient] = None

mongodb = MongoDB()


def get_client() -> AsyncIOMotorClient:
    """Return the shared client, creating it on first use."""
    if mongodb.client is None:
        try:
            mongodb.client = AsyncIOMotorClient(
                settings.MONGO_URI,
                serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
                tz_aware=False,
            )
        # malformed URIs raise InvalidURI or a bare ValueError (e.g. non-numeric port)
        except (PyMongoError, ValueError) as e:
            logger.error("Could not create MongoDB client: %s", e)
            raise StorageUnavailable("Could not connect to the database") from e
        logger.info("MongoDB client created for database %s", settings.MONGO_DB_NAME)
    return mongodb.client


# 🔹 Return database object
async def get_database():
    return get_client()[settings.MONGO_DB_NAME]


# 🔹 Connect MongoDB (called on startup)
async def connect_to_mongo():
    get_client()


# 🔹 Close connection (shutdown)
async def close_mongo_connection():
    if mongodb.client is not None:
        mongodb.client.close()
        mongodb.client = None
        logger.info("MongoDB connection closed")
