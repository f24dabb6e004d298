"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.
The services work with the dataclasses in bookstore.models; these schemas
control exactly what crosses the HTTP boundary.

Schema Naming Convention:
- XxxRequest / XxxCreate: Request bodies
- XxxResponse: Fields returned in API responses
"""

from bookstore.schemas.book import BookResponse
from bookstore.schemas.review import (
    ReviewCreate,
    ReviewMutationResponse,
    ReviewResponse,
)
from bookstore.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)

__all__ = [
    # Book schemas
    "BookResponse",
    # User / auth schemas
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    # Review schemas
    "ReviewCreate",
    "ReviewResponse",
    "ReviewMutationResponse",
]
