"""
Security Service

Password hashing primitives used by the CredentialStore.

Security Features:
==================
1. Password hashing with bcrypt (passlib)
2. Configurable cost factor (bcrypt_rounds, 10 by default)
3. Constant-time verification

Usage:
    from bookstore.services.security import PasswordHasher

    hasher = PasswordHasher(rounds=10)
    hashed = hasher.hash("pw1")
    hasher.verify("pw1", hashed)  # True
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10


class PasswordHasher:
    """
    Salted one-way password hashing with bcrypt.

    CryptContext handles the hashing:
    - schemes: bcrypt only
    - deprecated: "auto" means hashes with an outdated cost are flagged
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plain text password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash of the password

        Example:
            >>> PasswordHasher(rounds=4).hash("pw1").startswith("$2b$")
            True
        """
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a bcrypt hash.

        Returns False (instead of raising) when the stored hash cannot be
        parsed, so a corrupt record reads as a failed login.

        Args:
            plain_password: The password to verify
            hashed_password: The stored bcrypt hash

        Returns:
            True if password matches, False otherwise
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            logger.warning("Stored password hash could not be parsed")
            return False
