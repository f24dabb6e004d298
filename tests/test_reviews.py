"""
Tests for Reviews

Tests the review endpoints end to end:
- List reviews for a book (404 when there are none)
- Add or modify a review (authenticated, 201 then 200)
- Delete a review (author only)

Business Rules:
- One review per user per book
- Only the review author can delete
"""

from datetime import timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from bookstore.models import User
from bookstore.services import SessionIssuer

ISBN = "9780123456789"


def post_review(client: TestClient, headers: dict, rating=5, comment="great", isbn=ISBN):
    return client.post(
        f"/api/books/{isbn}/reviews",
        json={"rating": rating, "comment": comment},
        headers=headers,
    )


# =============================================================================
# List Reviews for Book
# =============================================================================


class TestListBookReviews:
    """Tests for GET /api/books/{isbn}/reviews"""

    def test_list_reviews_empty_is_404(self, client: TestClient):
        response = client.get(f"/api/books/{ISBN}/reviews")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "No reviews found for this book"}

    def test_list_reviews_in_submission_order(
        self, client: TestClient, alice_headers: dict, bob_headers: dict
    ):
        post_review(client, bob_headers, rating=3, comment="ok")
        post_review(client, alice_headers, rating=5, comment="great")
        # Bob updating must not move his review to the end
        post_review(client, bob_headers, rating=4, comment="better on reread")

        response = client.get(f"/api/books/{ISBN}/reviews")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [r["username"] for r in data] == ["bob", "alice"]
        assert data[0]["rating"] == 4

    def test_list_reviews_only_for_that_book(
        self, client: TestClient, alice_headers: dict
    ):
        post_review(client, alice_headers, isbn="9780987654321")

        response = client.get(f"/api/books/{ISBN}/reviews")

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Add / Modify Review
# =============================================================================


class TestUpsertReview:
    """Tests for POST /api/books/{isbn}/reviews"""

    def test_create_review_success(self, client: TestClient, alice: dict, alice_headers: dict):
        response = post_review(client, alice_headers)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["message"] == "Review added successfully"
        review = data["review"]
        assert review["id"] == 1
        assert review["isbn"] == ISBN
        assert review["userId"] == alice["user"]["id"]
        assert review["username"] == "alice"
        assert review["rating"] == 5
        assert review["comment"] == "great"
        assert review["createdAt"] == review["updatedAt"]

    def test_second_post_updates_in_place(self, client: TestClient, alice_headers: dict):
        first = post_review(client, alice_headers).json()["review"]
        response = post_review(client, alice_headers, rating=4, comment="good")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Review updated successfully"
        second = data["review"]
        assert second["id"] == first["id"]
        assert second["createdAt"] == first["createdAt"]
        assert second["updatedAt"] >= first["updatedAt"]
        assert (second["rating"], second["comment"]) == (4, "good")

        listing = client.get(f"/api/books/{ISBN}/reviews").json()
        assert len(listing) == 1

    def test_review_requires_token(self, client: TestClient):
        response = post_review(client, {})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"message": "Access denied"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_review_rejects_garbage_token(self, client: TestClient):
        response = post_review(client, {"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"message": "Invalid token"}

    def test_review_rejects_expired_token(self, client: TestClient, sessions: SessionIssuer):
        user = User(id=1, username="alice", email="a@x.com", password_hash="x")
        token = sessions.issue(user, expires_delta=timedelta(seconds=-1))

        response = post_review(client, {"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_review_rejects_token_signed_with_other_secret(self, client: TestClient):
        forger = SessionIssuer("another-secret-key-that-is-definitely-32-chars")
        user = User(id=1, username="alice", email="a@x.com", password_hash="x")

        response = post_review(client, {"Authorization": f"Bearer {forger.issue(user)}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_review_unknown_book(self, client: TestClient, alice_headers: dict):
        response = post_review(client, alice_headers, isbn="0000000000000")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Book not found"}

    @pytest.mark.parametrize(
        "body, message",
        [
            ({"comment": "no rating"}, "Rating and comment are required"),
            ({"rating": 5}, "Rating and comment are required"),
            ({}, "Rating and comment are required"),
            ({"rating": 5, "comment": ""}, "Rating and comment are required"),
            ({"rating": 5, "comment": "   "}, "Rating and comment are required"),
            ({"rating": 0, "comment": "too low"}, "Rating must be between 1 and 5"),
            ({"rating": 6, "comment": "too high"}, "Rating must be between 1 and 5"),
        ],
    )
    def test_review_validation(
        self, client: TestClient, alice_headers: dict, body: dict, message: str
    ):
        response = client.post(
            f"/api/books/{ISBN}/reviews",
            json=body,
            headers=alice_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": message}

    def test_review_non_numeric_rating(self, client: TestClient, alice_headers: dict):
        response = post_review(client, alice_headers, rating="five")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"].startswith("Invalid request")

    def test_token_checked_before_body(self, client: TestClient):
        response = client.post(f"/api/books/{ISBN}/reviews", json={})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Delete Review
# =============================================================================


class TestDeleteReview:
    """Tests for DELETE /api/reviews/{review_id}"""

    def test_delete_own_review(self, client: TestClient, alice_headers: dict):
        review = post_review(client, alice_headers).json()["review"]

        response = client.delete(f"/api/reviews/{review['id']}", headers=alice_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Review deleted successfully"
        assert data["review"]["id"] == review["id"]

    def test_delete_other_users_review_forbidden(
        self, client: TestClient, alice_headers: dict, bob_headers: dict
    ):
        review = post_review(client, alice_headers).json()["review"]

        response = client.delete(f"/api/reviews/{review['id']}", headers=bob_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {"message": "Not authorized to delete this review"}
        listing = client.get(f"/api/books/{ISBN}/reviews").json()
        assert listing == [review]

    def test_delete_missing_review(self, client: TestClient, alice_headers: dict):
        response = client.delete("/api/reviews/999", headers=alice_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Review not found"}

    def test_delete_requires_token(self, client: TestClient, alice_headers: dict):
        post_review(client, alice_headers)

        response = client.delete("/api/reviews/1")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_delete_does_not_renumber(
        self, client: TestClient, alice_headers: dict, bob_headers: dict
    ):
        first = post_review(client, alice_headers).json()["review"]
        second = post_review(client, bob_headers, comment="meh", rating=2).json()["review"]

        client.delete(f"/api/reviews/{first['id']}", headers=alice_headers)
        listing = client.get(f"/api/books/{ISBN}/reviews").json()

        assert [r["id"] for r in listing] == [second["id"]]
        # A fresh review gets a new id; the deleted one is not reused
        third = post_review(client, alice_headers).json()["review"]
        assert third["id"] not in (first["id"], second["id"])

    @pytest.mark.parametrize("review_id", ["abc", "1.5", "one"])
    def test_delete_non_integer_id_is_not_found(
        self, client: TestClient, alice_headers: dict, review_id: str
    ):
        post_review(client, alice_headers)
        response = client.delete(f"/api/reviews/{review_id}", headers=alice_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Review not found"}

    def test_delete_non_integer_id_still_needs_token(self, client: TestClient):
        response = client.delete("/api/reviews/abc")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Full Scenario
# =============================================================================


class TestReviewScenario:
    """The register -> login -> review -> update -> delete walkthrough."""

    def test_alice_walkthrough(self, client: TestClient, bob_headers: dict):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "a@x.com", "password": "pw1"},
        )
        assert response.status_code == status.HTTP_201_CREATED

        response = client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "pw1"}
        )
        assert response.status_code == status.HTTP_200_OK
        headers = {"Authorization": f"Bearer {response.json()['token']}"}

        response = post_review(client, headers, rating=5, comment="great")
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["review"]["id"] == 1

        response = post_review(client, headers, rating=4, comment="great")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["review"]["id"] == 1
        assert response.json()["review"]["rating"] == 4

        response = client.delete("/api/reviews/1", headers=bob_headers)
        assert response.status_code == status.HTTP_403_FORBIDDEN

        response = client.delete("/api/reviews/1", headers=headers)
        assert response.status_code == status.HTTP_200_OK

        response = client.get(f"/api/books/{ISBN}/reviews")
        assert response.status_code == status.HTTP_404_NOT_FOUND
