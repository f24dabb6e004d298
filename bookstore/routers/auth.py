"""
Authentication Router

Handles user authentication endpoints:
- Registration (username/email/password)
- Login (email/password -> bearer token)

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Login failures never reveal whether the email or the password was wrong
- Tokens expire after access_token_expire_minutes (1 hour by default)
"""

import logging

from fastapi import APIRouter, status

from bookstore.dependencies import Credentials, Sessions
from bookstore.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        400: {"description": "Bad request, duplicate user or invalid credentials"},
    },
)


# -------------------------------------------------------------------------
# Registration Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a new user account. The email must not already be registered.",
)
def register(
    user_data: RegisterRequest,
    credentials: Credentials,
) -> RegisterResponse:
    """
    Register a new user with username, email and password.

    1. Validates the body shape (handled by Pydantic)
    2. Rejects duplicate emails
    3. Hashes the password with bcrypt and stores the user
    4. Returns the user data (without password)
    """
    user = credentials.register(
        user_data.username,
        user_data.email,
        user_data.password,
    )
    return RegisterResponse(user=UserResponse.model_validate(user))


# -------------------------------------------------------------------------
# Login Endpoint
# -------------------------------------------------------------------------
@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="""
    Authenticate with email and password to receive a bearer token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
def login(
    login_data: LoginRequest,
    credentials: Credentials,
    sessions: Sessions,
) -> LoginResponse:
    """Authenticate user and return a signed session token."""
    user = credentials.authenticate(login_data.email, login_data.password)
    token = sessions.issue(user)

    logger.info(f"User logged in: {user.email}")

    return LoginResponse(
        token=token,
        expires_in=int(sessions.expires_delta.total_seconds()),
        user=UserResponse.model_validate(user),
    )
