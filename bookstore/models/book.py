"""
Book Model

A catalog entry. Books are created once at startup from the seed data in
bookstore.services.catalog and are never mutated afterwards, so the
dataclass is frozen.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Book:
    """
    A book available in the shop.

    Attributes:
        isbn: Primary key for catalog lookups
        title: Book title
        author: Author display name
        price: Retail price
        description: Short blurb
    """

    isbn: str
    title: str
    author: str
    price: Decimal
    description: str
