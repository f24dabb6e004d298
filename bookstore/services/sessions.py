"""
Session Issuer

Issues and verifies the bearer tokens that gate review mutations.

Tokens are HS256 JWTs (python-jose) carrying:
- sub: the user id (a string, as RFC 7519 requires)
- username: copied onto reviews the user writes
- type: always "access"
- exp: issuance time + access_token_expire_minutes (1 hour by default)

Nothing is persisted; every request re-verifies its token.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from bookstore.exceptions import InvalidTokenError, MissingTokenError
from bookstore.models import User

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_TYPE = "access"
DEFAULT_EXPIRE_MINUTES = 60


@dataclass(frozen=True)
class SessionClaims:
    """Identity recovered from a verified token."""

    user_id: int
    username: str


class SessionIssuer:
    """
    Signs and verifies session tokens with a shared secret.

    Usage:
        issuer = SessionIssuer(settings.secret_key)
        token = issuer.issue(user)
        claims = issuer.verify(token)
    """

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
    ) -> None:
        self._secret_key = secret_key
        self.expires_delta = timedelta(minutes=expire_minutes)

    def issue(self, user: User, expires_delta: timedelta | None = None) -> str:
        """
        Create a signed token for ``user``.

        Args:
            user: Authenticated user
            expires_delta: Override the configured lifetime

        Returns:
            Encoded JWT string (header.payload.signature)
        """
        expire = datetime.now(UTC) + (expires_delta or self.expires_delta)
        to_encode = {
            "sub": str(user.id),
            "username": user.username,
            "type": TOKEN_TYPE,
            "exp": expire,
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> SessionClaims:
        """
        Decode and validate a token.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token is malformed, mis-signed,
                expired, of the wrong type or missing claims
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise InvalidTokenError() from None

        if payload.get("type") != TOKEN_TYPE:
            logger.warning(f"Token type mismatch: expected {TOKEN_TYPE}")
            raise InvalidTokenError()

        user_id = payload.get("sub")
        username = payload.get("username")
        if user_id is None or username is None:
            raise InvalidTokenError()

        try:
            return SessionClaims(user_id=int(user_id), username=str(username))
        except (TypeError, ValueError):
            raise InvalidTokenError() from None
