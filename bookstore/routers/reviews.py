"""
Reviews Router

Endpoints:
- GET /books/{isbn}/reviews - List reviews for a book
- POST /books/{isbn}/reviews - Add or update your review (authenticated)
- DELETE /reviews/{review_id} - Delete your review (authenticated)

Business Rules:
- One review per user per book: posting again updates the existing
  review (200) instead of creating a new one (201)
- Only the review author can delete a review
- A book without reviews answers 404
"""

from typing import List

from fastapi import APIRouter, Response, status

from bookstore.dependencies import CurrentSession, Ledger
from bookstore.exceptions import NotFoundError
from bookstore.schemas import ReviewCreate, ReviewMutationResponse, ReviewResponse

router = APIRouter(
    tags=["Reviews"],
    responses={
        404: {"description": "Review or book not found"},
    },
)


@router.get(
    "/books/{isbn}/reviews",
    response_model=List[ReviewResponse],
    summary="List reviews for a book",
    description="Get every review for a book, oldest first.",
)
def list_book_reviews(isbn: str, ledger: Ledger) -> List[ReviewResponse]:
    """
    List all reviews for a book in submission order.

    Raises:
        NotFoundError: 404 if the book has no reviews
    """
    return [ReviewResponse.model_validate(r) for r in ledger.list_by_book(isbn)]


@router.post(
    "/books/{isbn}/reviews",
    response_model=ReviewMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add or modify a review",
    description="Create your review of a book, or replace its rating and comment "
    "if you already reviewed it. Requires a bearer token.",
    responses={
        200: {"description": "Existing review updated"},
        401: {"description": "Missing or invalid token"},
    },
)
def upsert_review(
    isbn: str,
    review_data: ReviewCreate,
    response: Response,
    ledger: Ledger,
    session: CurrentSession,
) -> ReviewMutationResponse:
    """
    Add or modify the caller's review of a book.

    Returns:
        201 with the new review, or 200 with the updated review

    Raises:
        NotFoundError: 404 if the book does not exist
    """
    result = ledger.upsert(
        isbn,
        session.user_id,
        session.username,
        review_data.rating,
        review_data.comment,
    )

    if result.created:
        message = "Review added successfully"
    else:
        response.status_code = status.HTTP_200_OK
        message = "Review updated successfully"

    return ReviewMutationResponse(
        message=message,
        review=ReviewResponse.model_validate(result.review),
    )


@router.delete(
    "/reviews/{review_id}",
    response_model=ReviewMutationResponse,
    summary="Delete a review",
    description="Delete one of your own reviews. Requires a bearer token.",
    responses={
        401: {"description": "Missing or invalid token"},
        403: {"description": "Review belongs to another user"},
    },
)
def delete_review(
    review_id: str,
    ledger: Ledger,
    session: CurrentSession,
) -> ReviewMutationResponse:
    """
    Delete a review written by the caller.

    A non-numeric id cannot name any review, so it is a 404 like any
    other unknown id.

    Raises:
        NotFoundError: 404 if the review does not exist
        ForbiddenError: 403 if the caller is not the author
    """
    try:
        parsed_id = int(review_id)
    except ValueError:
        raise NotFoundError("Review not found") from None

    review = ledger.delete(parsed_id, session.user_id)
    return ReviewMutationResponse(
        message="Review deleted successfully",
        review=ReviewResponse.model_validate(review),
    )
