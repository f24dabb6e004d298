"""
Review Ledger

The stateful core of the service: every review lives here.

Business Rules:
===============
- One review per (isbn, user_id). A second submission by the same user for
  the same book updates rating, comment and updated_at in place; id and
  created_at are kept.
- Review ids come from a monotonic counter and are never reused or
  renumbered, even after deletions.
- Only the author of a review can delete it.
- Listing preserves insertion order; an empty listing is a NotFoundError.

Concurrency:
============
A single threading.Lock serialises every operation. Each mutation (scan
then create/update, scan then remove) runs entirely under the lock, so an
upsert racing a delete on the same slot always ends in a well-defined
state. Callers only ever receive copies of the stored records.
"""

import itertools
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from bookstore.exceptions import ForbiddenError, NotFoundError, ValidationError
from bookstore.models import Review
from bookstore.services.catalog import BookCatalog

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class ReviewUpsert:
    """Result of ReviewLedger.upsert: the stored review and whether it is new."""

    review: Review
    created: bool


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReviewLedger:
    """
    In-memory review collection keyed by (isbn, user_id).

    Usage:
        ledger = ReviewLedger(BookCatalog())
        result = ledger.upsert("9780123456789", 1, "alice", 5, "great")
        result.created  # True
        ledger.delete(result.review.id, requesting_user_id=1)
    """

    def __init__(
        self,
        catalog: BookCatalog,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._catalog = catalog
        self._clock = clock
        self._lock = threading.Lock()
        # Insertion-ordered; dicts keep the order reviews were first created
        self._reviews: dict[int, Review] = {}
        self._slots: dict[tuple[str, int], int] = {}
        self._ids = itertools.count(1)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def list_by_book(self, isbn: str) -> list[Review]:
        """
        List reviews for a book in the order they were first submitted.

        Raises:
            NotFoundError: If the book has no reviews
        """
        with self._lock:
            reviews = [replace(r) for r in self._reviews.values() if r.isbn == isbn]

        if not reviews:
            raise NotFoundError("No reviews found for this book")
        return reviews

    def get(self, review_id: int) -> Review | None:
        """Get a copy of a review by id, or None."""
        with self._lock:
            review = self._reviews.get(review_id)
            return replace(review) if review is not None else None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def upsert(
        self,
        isbn: str,
        user_id: int,
        username: str,
        rating: int | None,
        comment: str | None,
    ) -> ReviewUpsert:
        """
        Create the user's review of a book, or update it if one exists.

        Args:
            isbn: Book being reviewed
            user_id: Authenticated author
            username: Author's username, stored on new reviews
            rating: 1-5 stars
            comment: Review text

        Returns:
            ReviewUpsert with a copy of the stored review; ``created`` is
            True for a new review and False for an update

        Raises:
            ValidationError: If rating or comment is missing, or the
                rating is outside 1-5
            NotFoundError: If the book is not in the catalog
        """
        if rating is None or not comment:
            raise ValidationError("Rating and comment are required")
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError("Rating must be an integer")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        if not self._catalog.exists(isbn):
            raise NotFoundError("Book not found")

        with self._lock:
            now = self._clock()
            review_id = self._slots.get((isbn, user_id))

            if review_id is not None:
                review = self._reviews[review_id]
                review.rating = rating
                review.comment = comment
                # Never move updated_at backwards if the clock does
                review.updated_at = max(now, review.updated_at)
                created = False
            else:
                review = Review(
                    id=next(self._ids),
                    isbn=isbn,
                    user_id=user_id,
                    username=username,
                    rating=rating,
                    comment=comment,
                    created_at=now,
                    updated_at=now,
                )
                self._reviews[review.id] = review
                self._slots[(isbn, user_id)] = review.id
                created = True

            snapshot = replace(review)

        logger.info(
            f"Review {'created' if created else 'updated'}: "
            f"id={snapshot.id} isbn={isbn} user_id={user_id}"
        )
        return ReviewUpsert(review=snapshot, created=created)

    def delete(self, review_id: int, requesting_user_id: int) -> Review:
        """
        Delete a review on behalf of its author.

        Returns:
            The removed review

        Raises:
            NotFoundError: If no review has this id
            ForbiddenError: If the requester is not the author
        """
        with self._lock:
            review = self._reviews.get(review_id)
            if review is None:
                raise NotFoundError("Review not found")

            if review.user_id != requesting_user_id:
                logger.warning(
                    f"User {requesting_user_id} tried to delete review {review_id} "
                    f"owned by user {review.user_id}"
                )
                raise ForbiddenError("Not authorized to delete this review")

            del self._reviews[review_id]
            del self._slots[(review.isbn, review.user_id)]

        logger.info(f"Review deleted: id={review_id} isbn={review.isbn}")
        return review

    def __len__(self) -> int:
        with self._lock:
            return len(self._reviews)
