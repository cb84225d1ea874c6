"""Fixtures for the items service tests.

The document store is replaced by an in-memory collection injected through
`app.dependency_overrides`, so no MongoDB server is needed.
"""

from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.db import get_collection
from app.main import create_app
from app.settings import Settings


class FakeCursor(list):
    def sort(self, key, direction=1):
        return FakeCursor(sorted(self, key=lambda doc: doc[key], reverse=direction < 0))


class FakeDatabase:
    name = "items"

    def __init__(self):
        self.error = None

    def command(self, name):
        if self.error is not None:
            raise self.error
        return {"ok": 1.0}


class FakeCollection:
    """The subset of `pymongo.collection.Collection` the routes use."""

    def __init__(self):
        self.docs = []
        self.error = None
        self.database = FakeDatabase()

    def find(self):
        if self.error is not None:
            raise self.error
        return FakeCursor(dict(doc) for doc in self.docs)

    def insert_one(self, doc):
        if self.error is not None:
            raise self.error
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return SimpleNamespace(inserted_id=doc["_id"], acknowledged=True)


@pytest.fixture
def settings():
    return Settings(default_uri="mongodb://localhost:27017/items_test", log_level="DEBUG")


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def items_app(settings, collection):
    items_app = create_app(settings)
    items_app.dependency_overrides[get_collection] = lambda: collection
    return items_app


@pytest.fixture
def client(items_app):
    """Client without lifespan: no endpoint resolution, no real client."""
    return TestClient(items_app, raise_server_exceptions=False)
