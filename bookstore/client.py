"""
Catalog Client

Async HTTP helpers for the read-only catalog endpoints, built on httpx.

Every method performs one request and either returns the decoded JSON
body or raises httpx.HTTPStatusError (for 4xx/5xx answers) or another
httpx.HTTPError (for transport failures).

Usage:
    async with BookstoreClient("http://localhost:3000/api") as client:
        books = await client.get_all_books()
        book = await client.get_book_by_isbn("9780123456789")
        by_author = await client.get_books_by_author("John Developer")
        by_title = await client.get_books_by_title("Node")
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT = 10.0


class BookstoreClient:
    """
    Thin async wrapper around the bookstore catalog API.

    Args:
        base_url: API root, including the /api prefix
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport (e.g. httpx.ASGITransport in tests)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "BookstoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def _get(self, path: str) -> Any:
        response = await self._client.get(path)
        if response.is_error:
            logger.warning(f"GET {path} failed with status {response.status_code}")
        response.raise_for_status()
        return response.json()

    async def get_all_books(self) -> list[dict[str, Any]]:
        """Fetch every book in the shop."""
        return await self._get("/books")

    async def get_book_by_isbn(self, isbn: str) -> dict[str, Any]:
        """Fetch one book; raises HTTPStatusError (404) if unknown."""
        return await self._get(f"/books/isbn/{quote(isbn, safe='')}")

    async def get_books_by_author(self, author: str) -> list[dict[str, Any]]:
        """Fetch books whose author contains ``author``."""
        return await self._get(f"/books/author/{quote(author, safe='')}")

    async def get_books_by_title(self, title: str) -> list[dict[str, Any]]:
        """Fetch books whose title contains ``title``."""
        return await self._get(f"/books/title/{quote(title, safe='')}")
