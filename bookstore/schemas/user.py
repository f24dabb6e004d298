"""
User Pydantic Schemas

Schemas:
- RegisterRequest: Registration data (username, email, password)
- LoginRequest: Email/password credentials
- UserResponse: Public user data (never exposes the password hash)
- RegisterResponse / LoginResponse: Auth endpoint envelopes

Emails are kept exactly as submitted: uniqueness and login both use a
case-sensitive exact match.

Request fields default to None so that a missing field reaches the
CredentialStore, which answers with the same message as an empty one
("All fields are required" on registration, "Invalid email or password"
on login).
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Schema for user registration.

    Example request body:
    {
        "username": "alice",
        "email": "a@x.com",
        "password": "pw1"
    }
    """

    username: str | None = Field(
        default=None,
        max_length=50,
        description="Display name",
        examples=["alice"],
    )
    email: str | None = Field(
        default=None,
        max_length=255,
        description="Email address used to log in",
        examples=["a@x.com"],
    )
    password: str | None = Field(
        default=None,
        max_length=72,
        description="Password (bcrypt uses at most 72 bytes)",
        examples=["pw1"],
    )


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: str | None = Field(default=None, description="Registered email address")
    password: str | None = Field(default=None, description="Account password")


class UserResponse(BaseModel):
    """
    Schema for user responses.

    SECURITY: Never includes the password or its hash.
    """

    id: int = Field(..., description="Unique user identifier", examples=[1])
    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    model_config = ConfigDict(from_attributes=True)


class RegisterResponse(BaseModel):
    """Returned by POST /auth/register."""

    message: str = Field(default="User registered successfully")
    user: UserResponse


class LoginResponse(BaseModel):
    """
    Returned by POST /auth/login.

    Send the token back on protected routes:
        Authorization: Bearer <token>
    """

    message: str = Field(default="Logged in successfully")
    token: str = Field(..., description="Signed bearer token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Logged in successfully",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
                "user": {"id": 1, "username": "alice", "email": "a@x.com"},
            }
        },
    )
