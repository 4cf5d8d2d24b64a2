from typing import Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    """A book in the store catalogue."""

    title: str
    author: str
    genre: str
    published_year: int = Field(..., description="Year of first publication")
    price: float = Field(..., ge=0, description="Shelf price in dollars")
    in_stock: bool = True

    # Catalogue extras, not queried by the runner
    pages: Optional[int] = Field(None, gt=0)
    publisher: Optional[str] = None
