"""
Catalog Service

Read-only book catalog held in memory.

The catalog is seeded once at startup (DEFAULT_BOOKS) and never changes,
so lookups need no locking. Searches are case-insensitive substring
matches, mirroring the title/author filters of a SQL ``LIKE '%term%'``.

Lookups that come back empty raise NotFoundError; the gateway turns that
into a 404.
"""

from collections.abc import Iterable
from decimal import Decimal

from bookstore.exceptions import NotFoundError
from bookstore.models import Book

# =============================================================================
# Seed Data
# =============================================================================

DEFAULT_BOOKS: tuple[Book, ...] = (
    Book(
        isbn="9780123456789",
        title="Node.js Fundamentals",
        author="John Developer",
        price=Decimal("29.99"),
        description="A comprehensive guide to Node.js development",
    ),
    Book(
        isbn="9780987654321",
        title="Express.js in Action",
        author="Jane Programmer",
        price=Decimal("24.99"),
        description="Learn how to build web applications with Express.js",
    ),
    Book(
        isbn="9781122334455",
        title="Modern JavaScript",
        author="John Developer",
        price=Decimal("34.99"),
        description="Advanced JavaScript techniques for modern web development",
    ),
)


class BookCatalog:
    """
    Immutable lookup table of books keyed by ISBN.

    Usage:
        catalog = BookCatalog()
        catalog.get_by_isbn("9780123456789").title
        catalog.search_by_author("john")
    """

    def __init__(self, books: Iterable[Book] = DEFAULT_BOOKS) -> None:
        self._books: tuple[Book, ...] = tuple(books)
        self._by_isbn: dict[str, Book] = {book.isbn: book for book in self._books}

    def list_books(self) -> list[Book]:
        """Return every book in seed order."""
        return list(self._books)

    def exists(self, isbn: str) -> bool:
        return isbn in self._by_isbn

    def get_by_isbn(self, isbn: str) -> Book:
        """
        Get a book by ISBN.

        Raises:
            NotFoundError: If no book has this ISBN
        """
        book = self._by_isbn.get(isbn)
        if book is None:
            raise NotFoundError("Book not found")
        return book

    def search_by_author(self, author: str) -> list[Book]:
        """
        Find books whose author contains ``author`` (case-insensitive).

        Raises:
            NotFoundError: If nothing matches
        """
        term = author.lower()
        books = [book for book in self._books if term in book.author.lower()]
        if not books:
            raise NotFoundError("No books found for this author")
        return books

    def search_by_title(self, title: str) -> list[Book]:
        """
        Find books whose title contains ``title`` (case-insensitive).

        Raises:
            NotFoundError: If nothing matches
        """
        term = title.lower()
        books = [book for book in self._books if term in book.title.lower()]
        if not books:
            raise NotFoundError("No books found with this title")
        return books
