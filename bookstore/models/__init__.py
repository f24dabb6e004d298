"""
Domain Models Package

Plain dataclasses for the records the services own. The catalog, the
credential store and the review ledger keep these in memory; the API
layer converts them to Pydantic schemas for responses.

Import from here:
    from bookstore.models import Book, Review, User
"""

from bookstore.models.book import Book
from bookstore.models.review import Review
from bookstore.models.user import User

__all__ = [
    "Book",
    "Review",
    "User",
]
