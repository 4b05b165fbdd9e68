"""
Password hashing utilities.

Passwords are never stored in plaintext. The create-user service calls
hash_password() explicitly before building the User row, and the
authentication dependency calls verify_password() on every guarded request.

Argon2id is used through passlib's CryptContext. It is memory-hard and
time-hard, which makes GPU brute-forcing of a leaked database expensive.
Every hash carries its own random salt, so two users with the same password
still get different stored values.
"""

from passlib.context import CryptContext


# If the scheme ever changes, passlib keeps verifying old hashes with the
# original scheme while new passwords use the new one ("deprecated='auto'").
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Hash a plaintext password using Argon2id.

    Args:
        plain_password: The user's raw password input.

    Returns:
        An Argon2 hash string (e.g., "$argon2id$v=19$m=65536,t=3,p=4$...").
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plaintext password against a stored Argon2 hash.

    The comparison is constant-time, so response timing doesn't leak how
    much of the password matched.

    Returns:
        True if the password matches, False otherwise.
    """
    return pwd_context.verify(plain_password, hashed_password)
