from functools import lru_cache

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from config.logger import logger

USERS_COLLECTION = "users"
MOVIES_COLLECTION = "movies"
THEATERS_COLLECTION = "theaters"
COMMENTS_COLLECTION = "comments"


@lru_cache
def get_mongo_client(uri: str) -> AsyncMongoClient:
    """Return the process-wide MongoDB client for ``uri``.

    The client connects lazily on its first operation and pools connections
    internally, so one instance is shared by all requests.

    Args:
        uri (str): MongoDB connection string.

    Returns:
        AsyncMongoClient: The shared client.
    """
    logger.info("Creating MongoDB client")
    return AsyncMongoClient(uri, tz_aware=True)


def get_mongo_database(uri: str, name: str) -> AsyncDatabase:
    return get_mongo_client(uri)[name]


async def ensure_indexes(db: AsyncDatabase) -> None:
    """Create the indexes the application relies on.

    The unique index on ``users.username`` backs up the existence check
    done at signup, which alone cannot stop two concurrent signups.

    Args:
        db (AsyncDatabase): The application database.
    """
    await db[USERS_COLLECTION].create_index(
        [("username", ASCENDING)],
        unique=True,
        name="username_unique"
    )
    await db[COMMENTS_COLLECTION].create_index(
        [("movie_id", ASCENDING)],
        name="movie_id"
    )


async def close_mongo_client(uri: str) -> None:
    """Close the shared client, if it was ever created."""
    if get_mongo_client.cache_info().currsize:
        await get_mongo_client(uri).close()
        get_mongo_client.cache_clear()
