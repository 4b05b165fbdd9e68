"""
Users router.

Endpoints:
  GET  /api/users  — The currently authenticated user (Basic Auth required)
  POST /api/users  — Create a user (public)

Security audit notes:
  - Plaintext passwords exist only in memory during request processing;
    they are hashed before any database operation and never logged.
  - The request logging middleware records method, path and status only,
    so POST bodies containing passwords are not written to any log.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.user import UserCreateRequest, UserResponse
from app.services import user_service

router = APIRouter()


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
)
async def get_authenticated_user(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Return the user whose credentials authenticated this request.

    The record is read again by email address rather than reusing the
    object resolved during authentication.
    """
    return await user_service.get_current_user_record(db, current_user.email_address)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Create a user",
)
async def create_user(
    request: UserCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user.

    - **firstName** / **lastName**: Required, non-empty
    - **emailAddress**: Required, valid email format, not already in use
    - **password**: Required, non-empty

    Responds 201 with an empty body and `Location: /`.
    """
    await user_service.create_user(
        db=db,
        first_name=request.first_name,
        last_name=request.last_name,
        email_address=request.email_address,
        password=request.password,
    )
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": "/"})
