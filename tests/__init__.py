"""
Test Suite for the Bookstore API

Test Organization:
- conftest.py: Shared fixtures (fresh app per test, services, logged-in users)
- test_books.py: Tests for /api/books endpoints and the catalog
- test_auth.py: Tests for /api/auth endpoints, health and 500 handling
- test_reviews.py: Tests for review endpoints and the full review walkthrough
- test_review_ledger.py: Ledger rules and concurrency
- test_credentials.py / test_sessions.py: Password and token services
- test_client.py: Async catalog client over httpx.ASGITransport
- test_config.py: Settings validation

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_reviews.py

    # Run with verbose output
    pytest -v
"""
