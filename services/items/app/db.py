"""Document store connectivity for the items service.

The connection URI is resolved once at startup (see `app.main.lifespan`);
this module only turns it into a pymongo client and hands the items
collection to route handlers.

Design goals:
- one `MongoClient` per process, shared by every request (it is thread-safe
  and pools connections itself),
- request handlers never see the URI or the client, only the collection,
- tests swap the collection via `app.dependency_overrides[get_collection]`.
"""

from __future__ import annotations

import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection

from .settings import Settings

logger = logging.getLogger(__name__)


def connect(uri: str, settings: Settings) -> MongoClient:
    """Create the process-wide client for `uri`.

    pymongo connects lazily, so this does not block on the network; an
    unreachable server surfaces as a `PyMongoError` on first use.

    Args:
        uri: Resolved connection URI.
        settings: Service settings (timeouts).

    Returns:
        pymongo.MongoClient: The client.
    """
    return MongoClient(uri, serverSelectionTimeoutMS=settings.server_selection_timeout_ms)


def items_collection(client: MongoClient, settings: Settings) -> Collection:
    """Return the items collection in the URI's database.

    Falls back to `settings.database_name` when the URI names no database.
    """
    database = client.get_default_database(default=settings.database_name)
    logger.info("using database %r, collection %r", database.name, settings.collection_name)
    return database[settings.collection_name]


def get_collection(request: Request) -> Collection:
    """FastAPI dependency returning the items collection.

    Route handlers declare `collection: Collection = Depends(get_collection)`.
    """
    return request.app.state.collection
