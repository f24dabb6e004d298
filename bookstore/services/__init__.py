"""
Services Package

This package contains business logic services that are:
- Separate from HTTP handling (routers)
- Reusable across different parts of the application
- Easier to test in isolation

Current services:
- catalog.py: Read-only book catalog and author/title search
- credentials.py: User registration and email/password authentication
- reviews.py: Review ledger (one review per user per book)
- security.py: bcrypt password hashing
- sessions.py: JWT session token issuing and verification
"""

from bookstore.services.catalog import BookCatalog
from bookstore.services.credentials import CredentialStore
from bookstore.services.reviews import ReviewLedger, ReviewUpsert
from bookstore.services.security import PasswordHasher
from bookstore.services.sessions import SessionClaims, SessionIssuer

__all__ = [
    "BookCatalog",
    "CredentialStore",
    "PasswordHasher",
    "ReviewLedger",
    "ReviewUpsert",
    "SessionClaims",
    "SessionIssuer",
]
