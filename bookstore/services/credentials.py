"""
Credential Store

Owns the user records: registration and email/password authentication.

Concurrency:
============
All reads and writes of the user collection happen under a single
threading.Lock. bcrypt is deliberately slow, so hashing and verification
run outside the lock; the duplicate-email check is repeated under the
lock right before the insert so two concurrent registrations for the same
email cannot both succeed.

Security:
=========
- Passwords are hashed with bcrypt before storage
- The plain password is never stored, returned or logged
- Unknown email and wrong password fail with the same error
"""

import itertools
import logging
import threading

from bookstore.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UnexpectedError,
    ValidationError,
)
from bookstore.models import User
from bookstore.services.security import PasswordHasher

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    In-memory user registry.

    Usage:
        store = CredentialStore(PasswordHasher(rounds=10))
        user = store.register("alice", "a@x.com", "pw1")
        store.authenticate("a@x.com", "pw1") == user  # True
    """

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()
        self._lock = threading.Lock()
        self._users_by_email: dict[str, User] = {}
        self._users_by_id: dict[int, User] = {}
        self._ids = itertools.count(1)

    def register(self, username: str | None, email: str | None, password: str | None) -> User:
        """
        Register a new user.

        Args:
            username: Display name
            email: Login identifier (exact, case-sensitive match)
            password: Plain text password, hashed before storage

        Returns:
            The created User

        Raises:
            ValidationError: If any field is missing or empty
            DuplicateUserError: If the email is already registered
            UnexpectedError: If password hashing fails
        """
        if not username or not email or not password:
            raise ValidationError("All fields are required")

        # Fail fast before paying for a bcrypt round
        with self._lock:
            if email in self._users_by_email:
                raise DuplicateUserError()

        try:
            password_hash = self._hasher.hash(password)
        except (ValueError, TypeError) as exc:
            logger.error(f"Password hashing failed during registration: {type(exc).__name__}")
            raise UnexpectedError() from exc

        with self._lock:
            if email in self._users_by_email:
                raise DuplicateUserError()
            user = User(
                id=next(self._ids),
                username=username,
                email=email,
                password_hash=password_hash,
            )
            self._users_by_email[email] = user
            self._users_by_id[user.id] = user

        logger.info(f"New user registered: {user.email} (id={user.id})")
        return user

    def authenticate(self, email: str | None, password: str | None) -> User:
        """
        Check an email/password pair.

        Returns:
            The matching User

        Raises:
            InvalidCredentialsError: If the email is unknown or the
                password does not match (same error for both)
        """
        with self._lock:
            user = self._users_by_email.get(email) if email else None

        if user is None:
            logger.warning(f"Login failed: user not found for {email}")
            raise InvalidCredentialsError()

        if not password or not self._hasher.verify(password, user.password_hash):
            logger.warning(f"Login failed: incorrect password for {email}")
            raise InvalidCredentialsError()

        return user

    def get(self, user_id: int) -> User | None:
        """Look up a user by id."""
        with self._lock:
            return self._users_by_id.get(user_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users_by_id)
