"""Database module for the Movies API.

The application talks to MongoDB directly through pymongo's asynchronous
client. There is no ORM and no repository layer: routers query the
collections named here.

The module exports:
- get_mongo_client / get_mongo_database: shared client and database handles
- ensure_indexes: startup index creation
- close_mongo_client: shutdown hook
- the collection names used by the routers
"""
from database.session_mongodb import (
    USERS_COLLECTION,
    MOVIES_COLLECTION,
    THEATERS_COLLECTION,
    COMMENTS_COLLECTION,
    get_mongo_client,
    get_mongo_database,
    ensure_indexes,
    close_mongo_client
)
