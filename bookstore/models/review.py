"""
Review Model

Represents a user's review of a book.

Business Rules:
- One review per user per book: a resubmission updates the existing record
- id and created_at never change once assigned
- Only the author can delete a review
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Review:
    """
    Review record owned by the ReviewLedger.

    Attributes:
        id: Sequential identifier, never reused or renumbered
        isbn: Reviewed book
        user_id: Author of the review
        username: Author's username at the time of the first submission
        rating: 1-5 star rating
        comment: Review text
        created_at: When the review was first submitted
        updated_at: When the rating/comment last changed
    """

    id: int
    isbn: str
    user_id: int
    username: str
    rating: int
    comment: str
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, isbn={self.isbn}, user_id={self.user_id}, rating={self.rating})>"
