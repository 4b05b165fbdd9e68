"""
User service — creation and lookup of users.

Creation flow:
  1. Check if the email address is already registered
  2. Hash the password with Argon2id (explicit step, not a model setter)
  3. Insert the User and flush so the generated id is available

Lookups are by exact-match email address, which is both the Basic-Auth
username and the key used to re-read the current user.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import CurrentUserNotFoundError, DuplicateEmailError
from app.models.user import User
from app.security import hash_password


async def create_user(
    db: AsyncSession,
    first_name: str,
    last_name: str,
    email_address: str,
    password: str,
) -> User:
    """
    Register a new user.

    Args:
        db: Database session.
        first_name: User's first name.
        last_name: User's last name.
        email_address: Login identifier (must be unique).
        password: Plaintext password (hashed before storage).

    Returns:
        The newly created User instance.

    Raises:
        DuplicateEmailError: If the email address is already registered.
    """
    if await get_user_by_email(db, email_address) is not None:
        raise DuplicateEmailError(email_address)

    user = User(
        first_name=first_name,
        last_name=last_name,
        email_address=email_address,
        hashed_password=hash_password(password),
    )
    db.add(user)
    await db.flush()
    return user


async def get_user_by_email(db: AsyncSession, email_address: str) -> User | None:
    """Return the user with exactly this email address, or None."""
    result = await db.execute(select(User).where(User.email_address == email_address))
    return result.scalar_one_or_none()


async def get_current_user_record(db: AsyncSession, email_address: str) -> User:
    """
    Re-read the authenticated user from the store.

    Raises:
        CurrentUserNotFoundError: If the user was deleted after authenticating.
    """
    user = await get_user_by_email(db, email_address)
    if user is None:
        raise CurrentUserNotFoundError(email_address)
    return user
