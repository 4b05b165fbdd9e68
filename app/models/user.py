"""
User model — the authentication identity and course owner.

Each User is a login credential (email address + hashed password) plus the
name shown next to the courses they own. The email address doubles as the
Basic-Auth username, so it is unique and indexed for the per-request lookup.

The password column only ever holds an Argon2id hash. Hashing happens in
the create-user service before the row is built; the model itself has no
setter magic, so assigning hashed_password stores exactly what is given.
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    # Login identifier: unique and indexed for fast lookups
    email_address: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Argon2id hash, stored in the "password" column (never plaintext!)
    hashed_password: Mapped[str] = mapped_column(
        "password",
        String(255),
        nullable=False,
    )

    # Audit timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # --- Relationships ---
    # One User can own many Courses
    courses: Mapped[list["Course"]] = relationship(
        back_populates="user",
    )
