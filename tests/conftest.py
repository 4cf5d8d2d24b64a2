import pytest
from mongomock_motor import AsyncMongoMockClient

from bookstore import db
from bookstore.config import settings
from bookstore.loader import load_books


@pytest.fixture(autouse=True)
def reset_client():
    """Make sure no test leaks the shared client into the next one."""
    db._client = None
    yield
    db._client = None


@pytest.fixture
def mock_client(monkeypatch):
    """In-memory Motor client installed as the shared client."""
    client = AsyncMongoMockClient()
    monkeypatch.setattr(db, "_client", client)
    return client


@pytest.fixture
async def books(mock_client):
    """The books collection seeded with the sample catalogue."""
    collection = mock_client[settings.mongodb_db][settings.mongodb_collection]
    await load_books(collection)
    return collection
