"""Book collection operations: filters, writes, sorting, pagination, aggregation, indexes.

Every function takes the ``books`` collection as its first argument and awaits a
single round trip (or two, for the write-then-confirm helpers). Results are the
driver's own documents; nothing here post-processes them.
"""

from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

DEFAULT_PAGE_SIZE = 5


# ---------------------------------------------------------------------------
# Basic reads
# ---------------------------------------------------------------------------


async def find_by_genre(books: AsyncIOMotorCollection, genre: str) -> list[dict]:
    return await books.find({"genre": genre}).to_list(None)


async def find_published_after(books: AsyncIOMotorCollection, year: int) -> list[dict]:
    return await books.find({"published_year": {"$gt": year}}).to_list(None)


async def find_by_author(books: AsyncIOMotorCollection, author: str) -> list[dict]:
    return await books.find({"author": author}).to_list(None)


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


async def update_price(
    books: AsyncIOMotorCollection, title: str, price: float
) -> dict | None:
    """Set the price of the book with *title* and return the document as stored afterwards.

    Title is not unique; with duplicates the store picks which one is updated.
    """
    await books.update_one({"title": title}, {"$set": {"price": price}})
    return await books.find_one({"title": title})


async def delete_by_title(books: AsyncIOMotorCollection, title: str) -> int:
    """Delete one book matching *title* and return how many documents remain."""
    await books.delete_one({"title": title})
    return await books.count_documents({})


# ---------------------------------------------------------------------------
# Advanced reads
# ---------------------------------------------------------------------------


async def find_in_stock_after(books: AsyncIOMotorCollection, year: int) -> list[dict]:
    return await books.find(
        {"in_stock": True, "published_year": {"$gt": year}}
    ).to_list(None)


async def find_summaries(books: AsyncIOMotorCollection) -> list[dict]:
    """All books reduced to title, author and price (no ``_id``)."""
    projection = {"title": 1, "author": 1, "price": 1, "_id": 0}
    return await books.find({}, projection).to_list(None)


async def sort_by_price(
    books: AsyncIOMotorCollection, *, descending: bool = False
) -> list[dict]:
    direction = DESCENDING if descending else ASCENDING
    return await books.find().sort("price", direction).to_list(None)


async def paginate(
    books: AsyncIOMotorCollection, page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> list[dict]:
    """
    Return one page of books in the store's natural order.

    Pages are 1-based: page 1 is the first *page_size* documents, page 2 skips
    those and returns the next *page_size*.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    cursor = books.find()
    offset = (page - 1) * page_size
    if offset:
        cursor = cursor.skip(offset)
    return await cursor.limit(page_size).to_list(page_size)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

AVERAGE_PRICE_BY_GENRE: list[dict[str, Any]] = [
    {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}}},
]

TOP_AUTHOR: list[dict[str, Any]] = [
    {"$group": {"_id": "$author", "bookCount": {"$sum": 1}}},
    {"$sort": {"bookCount": -1}},
    {"$limit": 1},
]

COUNT_BY_DECADE: list[dict[str, Any]] = [
    {
        "$project": {
            "decade": {
                "$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]
            }
        }
    },
    {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
    {"$sort": {"_id": 1}},
]


async def average_price_by_genre(books: AsyncIOMotorCollection) -> list[dict]:
    return await books.aggregate(AVERAGE_PRICE_BY_GENRE).to_list(None)


async def top_author(books: AsyncIOMotorCollection) -> list[dict]:
    """Author with the most books, as a one-element list (empty for an empty collection).

    Ties are broken by whatever order the store's sort leaves them in.
    """
    return await books.aggregate(TOP_AUTHOR).to_list(None)


async def count_by_decade(books: AsyncIOMotorCollection) -> list[dict]:
    return await books.aggregate(COUNT_BY_DECADE).to_list(None)


# ---------------------------------------------------------------------------
# Indexes
# ---------------------------------------------------------------------------


async def create_indexes(books: AsyncIOMotorCollection) -> list[str]:
    """Create the title index and the author/year compound index; return their names."""
    title_index = await books.create_index([("title", ASCENDING)])
    author_year_index = await books.create_index(
        [("author", ASCENDING), ("published_year", DESCENDING)]
    )
    return [title_index, author_year_index]


async def explain_title_lookup(books: AsyncIOMotorCollection, title: str) -> dict:
    """Run ``explain`` with executionStats verbosity for a find by *title*."""
    return await books.database.command(
        "explain",
        {"find": books.name, "filter": {"title": title}},
        verbosity="executionStats",
    )
