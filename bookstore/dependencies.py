"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The service objects (catalog, credential store, review ledger, session
issuer) are created by bookstore.main.create_app() and attached to
app.state. The getters below read them back from the current request, so
every application instance (and every test) has its own isolated stores.

Usage in routes:
    @router.post("/books/{isbn}/reviews")
    def add_review(isbn: str, ledger: Ledger, session: CurrentSession):
        ...
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookstore.services import (
    BookCatalog,
    CredentialStore,
    ReviewLedger,
    SessionClaims,
    SessionIssuer,
)

# =============================================================================
# Service Getters
# =============================================================================


def get_catalog(request: Request) -> BookCatalog:
    return request.app.state.catalog


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_review_ledger(request: Request) -> ReviewLedger:
    return request.app.state.reviews


def get_session_issuer(request: Request) -> SessionIssuer:
    return request.app.state.sessions


# Type aliases for cleaner route signatures
Catalog = Annotated[BookCatalog, Depends(get_catalog)]
Credentials = Annotated[CredentialStore, Depends(get_credential_store)]
Ledger = Annotated[ReviewLedger, Depends(get_review_ledger)]
Sessions = Annotated[SessionIssuer, Depends(get_session_issuer)]


# =============================================================================
# Bearer Token Authentication
# =============================================================================
# HTTPBearer extracts the token from "Authorization: Bearer <token>".
# auto_error=False hands a missing header to SessionIssuer.verify, which
# raises MissingTokenError so the response body keeps the {"message"} shape.

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_session(
    sessions: Sessions,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SessionClaims:
    """
    Verify the bearer token and return the caller's identity.

    This is the gate in front of every mutating review route.

    Raises:
        MissingTokenError: 401 if no bearer token was sent
        InvalidTokenError: 401 if the token fails verification
    """
    token = credentials.credentials if credentials else None
    return sessions.verify(token)


CurrentSession = Annotated[SessionClaims, Depends(get_current_session)]
