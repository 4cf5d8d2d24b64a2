"""Run the fixed bookstore query sequence against MongoDB and print every result."""

import asyncio
from pprint import pformat
from typing import Any

from bookstore import queries
from bookstore.config import settings
from bookstore.db import close_db, get_books, get_client

GENRE = "Fiction"
PUBLISHED_AFTER = 1950
AUTHOR = "George Orwell"

UPDATE_TITLE = "1984"
UPDATE_PRICE = 12.99

DELETE_TITLE = "Animal Farm"

IN_STOCK_AFTER = 2010

PAGE_SIZE = 5

EXPLAIN_TITLE = "The Hobbit"


def _print_result(header: str, result: Any) -> None:
    print(f"\n{header}")
    print(pformat(result, sort_dicts=False))


async def run_queries() -> None:
    """
    Run every query step in order, printing each result.

    Any exception aborts the remaining steps and is reported once; the client
    is closed whether or not a step failed. Nothing is re-raised.
    """
    try:
        await get_client().admin.command("ping")
        books = get_books()
        print(f"Connected to MongoDB: {settings.mongodb_db}.{books.name}")

        # -- Basic CRUD ------------------------------------------------------
        _print_result(
            f"Books in {GENRE} genre:",
            await queries.find_by_genre(books, GENRE),
        )
        _print_result(
            f"Books published after {PUBLISHED_AFTER}:",
            await queries.find_published_after(books, PUBLISHED_AFTER),
        )
        _print_result(
            f"Books by {AUTHOR}:",
            await queries.find_by_author(books, AUTHOR),
        )

        print(f'\nUpdating price of "{UPDATE_TITLE}"...')
        _print_result(
            "Updated:", await queries.update_price(books, UPDATE_TITLE, UPDATE_PRICE)
        )

        print(f'\nDeleting "{DELETE_TITLE}"...')
        remaining = await queries.delete_by_title(books, DELETE_TITLE)
        print(f"Remaining count: {remaining}")

        # -- Advanced queries ------------------------------------------------
        _print_result(
            f"In-stock books published after {IN_STOCK_AFTER}:",
            await queries.find_in_stock_after(books, IN_STOCK_AFTER),
        )
        _print_result(
            "Projection (title, author, price):",
            await queries.find_summaries(books),
        )
        _print_result(
            "Books sorted by price (asc):",
            await queries.sort_by_price(books),
        )
        _print_result(
            "Books sorted by price (desc):",
            await queries.sort_by_price(books, descending=True),
        )
        _print_result(
            f"Page 1 ({PAGE_SIZE} books):",
            await queries.paginate(books, 1, PAGE_SIZE),
        )
        _print_result(
            f"Page 2 (next {PAGE_SIZE} books):",
            await queries.paginate(books, 2, PAGE_SIZE),
        )

        # -- Aggregation -----------------------------------------------------
        _print_result(
            "Average price by genre:",
            await queries.average_price_by_genre(books),
        )
        _print_result(
            "Author with most books:",
            await queries.top_author(books),
        )
        _print_result(
            "Books grouped by decade:",
            await queries.count_by_decade(books),
        )

        # -- Indexing --------------------------------------------------------
        print("\nCreating indexes...")
        created = await queries.create_indexes(books)
        print(f"Indexes: {', '.join(created)}")

        _print_result(
            f'Index performance (find by title "{EXPLAIN_TITLE}"):',
            await queries.explain_title_lookup(books, EXPLAIN_TITLE),
        )
    except Exception as e:
        print(f"ERROR: {e}")
    finally:
        await close_db()
        print("\nConnection closed")


if __name__ == "__main__":
    asyncio.run(run_queries())
