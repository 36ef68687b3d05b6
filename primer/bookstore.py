"""Books, their categories and a catalogue of them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

__all__ = [
    "Category",
    "Book",
    "Catalog",
    "OutOfStockError",
    "BookNotFoundError",
    "buy",
]


class OutOfStockError(ValueError):
    """Raised when buying a book with no copies left."""


class BookNotFoundError(LookupError):
    """Raised when a catalogue has no book with the requested ID."""


class Category(IntEnum):
    """The categories a book may belong to."""

    AUTOBIOGRAPHY = 0
    LARGE_PRINT_ROMANCE = 1
    PARTICLE_PHYSICS = 2


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Book:
    """Information about a book.

    Setting a negative ``price_cents`` or an unknown ``category`` raises
    ValueError.
    """

    title: str = ""
    author: str = ""
    copies: int = 0
    id: int = 0
    price_cents: int = 0
    discount_percent: int = 0
    category: Category = Category.AUTOBIOGRAPHY

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "price_cents" and value < 0:
            raise ValueError(f"bad price {value} (must not be negative)")
        if name == "category":
            try:
                value = Category(value)
            except ValueError:
                raise ValueError(f"unknown category {value}") from None
        super().__setattr__(name, value)

    def net_price_cents(self) -> int:
        """Return the price in cents after the discount is taken off."""
        saving = _trunc_div(self.price_cents * self.discount_percent, 100)
        return self.price_cents - saving


def buy(book: Book) -> Book:
    """Return a copy of ``book`` with one copy fewer in stock.

    Raises OutOfStockError if there are no copies left.
    """
    if book.copies == 0:
        raise OutOfStockError("no copies left")
    return dataclasses.replace(book, copies=book.copies - 1)


class Catalog(dict):
    """A mapping from book ID to book."""

    def get_all_books(self) -> list[Book]:
        """Return every book in the catalogue, in no particular order."""
        return list(self.values())

    def get_book(self, book_id: int) -> Book:
        """Return the book with the given ID.

        Raises BookNotFoundError if there is none.
        """
        try:
            return self[book_id]
        except KeyError:
            raise BookNotFoundError(f"ID {book_id} doesn't exist") from None