"""Seed the books collection with the sample catalogue."""

import asyncio
import sys

from motor.motor_asyncio import AsyncIOMotorCollection

from bookstore.config import settings
from bookstore.db import close_db, get_books, init_db
from bookstore.models import Book

SAMPLE_BOOKS: list[Book] = [
    Book(title="To Kill a Mockingbird", author="Harper Lee", genre="Fiction",
         published_year=1960, price=12.99, in_stock=True, pages=336,
         publisher="J. B. Lippincott & Co."),
    Book(title="1984", author="George Orwell", genre="Dystopian",
         published_year=1949, price=10.99, in_stock=True, pages=328,
         publisher="Secker & Warburg"),
    Book(title="The Great Gatsby", author="F. Scott Fitzgerald", genre="Fiction",
         published_year=1925, price=9.99, in_stock=True, pages=180,
         publisher="Charles Scribner's Sons"),
    Book(title="Brave New World", author="Aldous Huxley", genre="Dystopian",
         published_year=1932, price=11.50, in_stock=False, pages=311,
         publisher="Chatto & Windus"),
    Book(title="The Hobbit", author="J.R.R. Tolkien", genre="Fantasy",
         published_year=1937, price=14.99, in_stock=True, pages=310,
         publisher="George Allen & Unwin"),
    Book(title="The Catcher in the Rye", author="J.D. Salinger", genre="Fiction",
         published_year=1951, price=8.99, in_stock=True, pages=224,
         publisher="Little, Brown and Company"),
    Book(title="Pride and Prejudice", author="Jane Austen", genre="Romance",
         published_year=1813, price=7.99, in_stock=True, pages=432,
         publisher="T. Egerton, Whitehall"),
    Book(title="The Lord of the Rings", author="J.R.R. Tolkien", genre="Fantasy",
         published_year=1954, price=19.99, in_stock=True, pages=1178,
         publisher="Allen & Unwin"),
    Book(title="Animal Farm", author="George Orwell", genre="Political Satire",
         published_year=1945, price=8.50, in_stock=False, pages=112,
         publisher="Secker & Warburg"),
    Book(title="The Alchemist", author="Paulo Coelho", genre="Fiction",
         published_year=1988, price=10.99, in_stock=True, pages=197,
         publisher="HarperOne"),
    Book(title="Moby Dick", author="Herman Melville", genre="Adventure",
         published_year=1851, price=12.50, in_stock=False, pages=635,
         publisher="Harper & Brothers"),
    Book(title="Wuthering Heights", author="Emily Brontë", genre="Gothic Fiction",
         published_year=1847, price=9.99, in_stock=True, pages=342,
         publisher="Thomas Cautley Newby"),
]


async def load_books(
    books: AsyncIOMotorCollection | None = None, *, drop: bool = False
) -> int:
    """Insert the sample catalogue and return how many documents were written.

    With ``drop=True`` every existing document is removed first, so repeated
    runs don't pile up duplicate titles. The title and author/year
    indexes are created once the documents are in.
    """
    if books is None:
        books = get_books()

    if drop:
        result = await books.delete_many({})
        print(f"Removed {result.deleted_count} existing books.")

    docs = [book.model_dump() for book in SAMPLE_BOOKS]
    result = await books.insert_many(docs)
    await init_db(books)
    return len(result.inserted_ids)


async def main() -> None:
    drop = "--drop" in sys.argv

    try:
        inserted = await load_books(drop=drop)
        print(
            f"Inserted {inserted} books into "
            f"{settings.mongodb_db}.{settings.mongodb_collection}."
        )
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
