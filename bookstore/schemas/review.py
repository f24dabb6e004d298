"""
Review Pydantic Schemas

Schemas:
- ReviewCreate: Body of POST /books/{isbn}/reviews (create or update)
- ReviewResponse: Full review data for API responses
- ReviewMutationResponse: {message, review} envelope for writes

Business Rules:
- Rating (1-5) and a non-blank comment are required; the ReviewLedger
  enforces both so the client sees its messages
- One review per user per book (enforced by the ReviewLedger)

Wire format:
- Reviews are serialised with camelCase keys (userId, createdAt,
  updatedAt); Python code keeps snake_case attribute names
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ReviewCreate(BaseModel):
    """
    Schema for submitting a review.

    Submitting again for the same book replaces the rating and comment.
    Missing fields are passed through as None and rejected by the ledger
    with "Rating and comment are required".

    Example request body:
    {
        "rating": 5,
        "comment": "great"
    }
    """

    rating: int | None = Field(
        default=None,
        description="Rating from 1 to 5 stars",
        examples=[4, 5],
    )
    comment: str | None = Field(
        default=None,
        max_length=5000,
        description="Review text",
        examples=["A must-read for backend developers."],
    )

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, v: str | None) -> str | None:
        """Whitespace-only comments count as missing."""
        return v.strip() if v is not None else v


class ReviewResponse(BaseModel):
    """Schema for review responses."""

    id: int = Field(..., description="Unique review identifier")
    isbn: str = Field(..., description="ISBN of the reviewed book")
    user_id: int = Field(..., description="ID of the user who wrote the review")
    username: str = Field(..., description="Author's username")
    rating: int = Field(..., description="Rating from 1 to 5 stars")
    comment: str = Field(..., description="Review text")
    created_at: datetime = Field(..., description="When the review was created")
    updated_at: datetime = Field(..., description="When the review was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "isbn": "9780123456789",
                "userId": 1,
                "username": "alice",
                "rating": 5,
                "comment": "great",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class ReviewMutationResponse(BaseModel):
    """Envelope returned when a review is added, updated or deleted."""

    message: str = Field(..., description="Outcome of the operation")
    review: ReviewResponse
