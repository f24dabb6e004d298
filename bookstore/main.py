"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() builds a fresh app with its own in-memory stores
   - Tests create one app per test for full isolation

2. Lifespan Events
   - startup/shutdown logging via an async context manager

3. Exception Handlers
   - BookstoreError subclasses map to their HTTP status + {"message"}
   - Request validation errors answer 400
   - Anything else answers 500 without leaking internals
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookstore import __version__
from bookstore.config import Settings, get_settings
from bookstore.exceptions import BookstoreError
from bookstore.routers import auth_router, books_router, reviews_router
from bookstore.services import (
    BookCatalog,
    CredentialStore,
    PasswordHasher,
    ReviewLedger,
    SessionIssuer,
)

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.app_name}...")
    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Debug mode: {app_settings.debug}")
    logger.info(f"Catalog loaded with {len(app.state.catalog.list_books())} books")

    yield

    logger.info(f"Shutting down {app_settings.app_name}...")


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Turn Pydantic errors into one readable line for the client."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


# =============================================================================
# Application Factory
# =============================================================================
def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every call builds new stores, so two apps never share users or reviews.

    Args:
        app_settings: Settings to use (defaults to get_settings())

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or get_settings()

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Bookstore API

A catalog of books with user reviews.

### Features
- **Books**: List books and look them up by ISBN, author or title
- **Auth**: Register and log in to receive a bearer token
- **Reviews**: One review per user per book; update or delete your own
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------
    # Each store owns its collection; routes reach them through
    # bookstore.dependencies, never through module globals.
    catalog = BookCatalog()
    app.state.settings = app_settings
    app.state.catalog = catalog
    app.state.credentials = CredentialStore(PasswordHasher(rounds=app_settings.bcrypt_rounds))
    app.state.reviews = ReviewLedger(catalog)
    app.state.sessions = SessionIssuer(
        app_settings.secret_key,
        expire_minutes=app_settings.access_token_expire_minutes,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookstoreError)
    async def bookstore_exception_handler(
        request: Request,
        exc: BookstoreError,
    ) -> JSONResponse:
        """Map a domain error to its status code and a {"message"} body."""
        if exc.status_code >= 500:
            logger.error(f"Service error on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Missing or malformed input is a 400, not FastAPI's default 422."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _format_validation_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if app_settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Server error", "error": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # books_router must come first so /books/isbn/{isbn} is matched before
    # /books/{isbn}/reviews
    api_prefix = app_settings.api_prefix
    app.include_router(books_router, prefix=api_prefix)
    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(reviews_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check(request: Request) -> dict:
        """Report liveness plus the size of each in-memory store."""
        state = request.app.state
        return {
            "status": "healthy",
            "app": app_settings.app_name,
            "version": __version__,
            "books": len(state.catalog.list_books()),
            "users": len(state.credentials),
            "reviews": len(state.reviews),
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
