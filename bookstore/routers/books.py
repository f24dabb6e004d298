"""
Books Router

Read-only catalog endpoints.

Endpoints:
- GET /books - List every book
- GET /books/isbn/{isbn} - Get a book by ISBN
- GET /books/author/{author} - Books whose author contains the term
- GET /books/title/{title} - Books whose title contains the term

Author and title searches are case-insensitive substring matches and
answer 404 when nothing matches.
"""

from typing import List

from fastapi import APIRouter

from bookstore.dependencies import Catalog
from bookstore.schemas import BookResponse

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book available in the shop.",
)
def list_books(catalog: Catalog) -> List[BookResponse]:
    """List all books."""
    return [BookResponse.model_validate(book) for book in catalog.list_books()]


@router.get(
    "/isbn/{isbn}",
    response_model=BookResponse,
    summary="Get a book by ISBN",
)
def get_book_by_isbn(isbn: str, catalog: Catalog) -> BookResponse:
    """
    Get a single book by its ISBN.

    Raises:
        NotFoundError: 404 if no book has this ISBN
    """
    return BookResponse.model_validate(catalog.get_by_isbn(isbn))


@router.get(
    "/author/{author}",
    response_model=List[BookResponse],
    summary="Find books by author",
    description="Case-insensitive partial match on the author name.",
)
def get_books_by_author(author: str, catalog: Catalog) -> List[BookResponse]:
    """List books by author (404 if none match)."""
    return [BookResponse.model_validate(b) for b in catalog.search_by_author(author)]


@router.get(
    "/title/{title}",
    response_model=List[BookResponse],
    summary="Find books by title",
    description="Case-insensitive partial match on the title.",
)
def get_books_by_title(title: str, catalog: Catalog) -> List[BookResponse]:
    """List books by title (404 if none match)."""
    return [BookResponse.model_validate(b) for b in catalog.search_by_title(title)]
