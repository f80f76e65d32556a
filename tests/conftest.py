"""Shared pytest fixtures.

MongoDB is replaced by an in-memory stand-in that supports the handful of
Motor collection calls the service makes.
"""

import copy
from types import SimpleNamespace

import pytest
import pytest_asyncio
from bson import ObjectId, encode
from httpx import ASGITransport, AsyncClient

from models.database import get_database
from services.tracker_service import TrackerService


def _matches(document, query):
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length=None):
        return self.documents if length is None else self.documents[:length]


class FakeCollection:
    """Insertion-ordered list of documents with Motor-like async methods.

    Writes are BSON-encoded first so values MongoDB cannot store fail here too.
    """

    def __init__(self):
        self.documents = []

    async def insert_one(self, document):
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        encode(stored)
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one(self, query):
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    def find(self, query):
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def update_one(self, query, update, upsert=False):
        encode(update)
        target = next((d for d in self.documents if _matches(d, query)), None)
        upserted_id = None
        if target is None:
            if not upsert:
                return SimpleNamespace(modified_count=0, upserted_id=None)
            target = dict(query, _id=ObjectId())
            self.documents.append(target)
            upserted_id = target["_id"]
        for key, amount in update.get("$inc", {}).items():
            target[key] = target.get(key, 0) + amount
        for key, value in update.get("$push", {}).items():
            target.setdefault(key, []).append(copy.deepcopy(value))
        return SimpleNamespace(modified_count=0 if upserted_id else 1, upserted_id=upserted_id)


class FakeDatabase:
    def __init__(self):
        self.users = FakeCollection()
        self.exercises = FakeCollection()
        self.logs = FakeCollection()


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def service(fake_db):
    return TrackerService(fake_db)


@pytest_asyncio.fixture
async def test_client(fake_db):
    """HTTPX AsyncClient talking to the app with the fake database injected."""
    from api.main import app
    app.dependency_overrides[get_database] = lambda: fake_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
