"""
Book Pydantic Schemas

Response shape for catalog entries. Books are read-only here, so there
are no create/update schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class BookResponse(BaseModel):
    """Schema for book responses."""

    isbn: str = Field(..., description="ISBN (primary key)")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    price: float = Field(..., ge=0, description="Retail price")
    description: str = Field(..., description="Short description")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "isbn": "9780123456789",
                "title": "Node.js Fundamentals",
                "author": "John Developer",
                "price": 29.99,
                "description": "A comprehensive guide to Node.js development",
            }
        },
    )
