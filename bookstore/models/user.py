"""
User Model

Registered account held by the CredentialStore. Users are created by
registration and are never updated or deleted.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """
    A registered user.

    Attributes:
        id: Sequential identifier, never reused
        username: Display name, copied onto the user's reviews
        email: Login identifier (unique, case-sensitive)
        password_hash: bcrypt hash; never serialised or logged
    """

    id: int
    username: str
    email: str
    password_hash: str = field(repr=False)
