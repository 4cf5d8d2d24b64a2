import pytest
from pydantic import ValidationError

from bookstore.models import Book


def test_book_dump_has_document_fields():
    book = Book(
        title="Dune",
        author="Frank Herbert",
        genre="Science Fiction",
        published_year=1965,
        price=9.99,
    )
    doc = book.model_dump()

    assert doc["title"] == "Dune"
    assert doc["published_year"] == 1965
    assert doc["in_stock"] is True
    assert doc["pages"] is None
    assert set(doc) == {
        "title", "author", "genre", "published_year", "price", "in_stock",
        "pages", "publisher",
    }


def test_book_rejects_negative_price():
    with pytest.raises(ValidationError):
        Book(
            title="Dune",
            author="Frank Herbert",
            genre="Science Fiction",
            published_year=1965,
            price=-1,
        )


def test_book_rejects_non_numeric_year():
    with pytest.raises(ValidationError):
        Book(
            title="Dune",
            author="Frank Herbert",
            genre="Science Fiction",
            published_year="sometime",
            price=9.99,
        )
