"""
FastAPI dependencies for authentication.

Guarded routes declare `Depends(get_current_user)`. FastAPI runs it before
the route handler, and if it raises, the request is rejected with 401 and
the handler never runs.

    Authorization: Basic base64(emailAddress:password)
        └── get_current_user (credentials -> User)

There is no session or token: the header is checked against the store on
every guarded request.
"""

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UserNotFoundError,
)
from app.models.user import User
from app.security import verify_password
from app.services import user_service


class BasicCredentialsScheme(HTTPBasic):
    """
    HTTPBasic that returns None instead of raising on a bad header.

    Depending on the FastAPI version, HTTPBasic can raise its own 401 for an
    undecodable header even with auto_error=False. Returning None lets
    get_current_user report a missing and a malformed header the same way.
    """

    async def __call__(self, request: Request) -> HTTPBasicCredentials | None:
        try:
            return await super().__call__(request)
        except HTTPException:
            return None


# Registers the Basic scheme in the OpenAPI docs ("Authorize" button in Swagger UI)
basic_scheme = BasicCredentialsScheme(auto_error=False)


async def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the Basic-Auth credentials to a User.

    Args:
        credentials: Parsed Authorization header (injected by basic_scheme).
        db: Database session (injected by get_db).

    Returns:
        The authenticated User instance.

    Raises:
        MissingCredentialsError: No usable Basic-Auth header.
        UserNotFoundError: No user has this email address.
        InvalidCredentialsError: The password doesn't match.
    """
    if credentials is None or not credentials.username or not credentials.password:
        raise MissingCredentialsError()

    user = await user_service.get_user_by_email(db, credentials.username)
    if user is None:
        raise UserNotFoundError()

    if not verify_password(credentials.password, user.hashed_password):
        raise InvalidCredentialsError()

    return user
