"""
API Routers Package

Router Structure:
- books.py: /api/books/* catalog endpoints
- auth.py: /api/auth/* endpoints (registration, login)
- reviews.py: /api/books/{isbn}/reviews and /api/reviews/{review_id}

Each router is imported and registered in main.py.
"""

from bookstore.routers.auth import router as auth_router
from bookstore.routers.books import router as books_router
from bookstore.routers.reviews import router as reviews_router

__all__ = [
    "auth_router",
    "books_router",
    "reviews_router",
]
