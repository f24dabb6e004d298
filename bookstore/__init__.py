"""
Bookstore API Package

A small bookstore catalog-and-review service.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- exceptions.py: Domain error hierarchy mapped to HTTP status codes
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- client.py: Async HTTP client for the catalog endpoints
- models/: In-memory domain records (dataclasses)
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (catalog, credentials, sessions, reviews)
"""

__version__ = "0.1.0"
