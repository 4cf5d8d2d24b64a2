from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from bookstore.config import settings
from bookstore.queries import create_indexes

_client: AsyncIOMotorClient | None = None


def get_client() -> AsyncIOMotorClient:
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.mongodb_uri)
    return _client


def get_db() -> AsyncIOMotorDatabase:
    return get_client()[settings.mongodb_db]


def get_books() -> AsyncIOMotorCollection:
    return get_db()[settings.mongodb_collection]


async def init_db(books: AsyncIOMotorCollection | None = None) -> list[str]:
    """Create the title and author/year indexes on the books collection."""
    if books is None:
        books = get_books()
    return await create_indexes(books)


async def close_db() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
