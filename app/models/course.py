"""
Course model — a course owned by exactly one User.

title and description are required; estimated_time and materials_needed
are free text and may be empty. The owner is fixed at creation time: the
update operation only rewrites the four content fields.

Course responses embed a projection of the owner (first name, last name,
email address), so queries that feed a response eager-load `user` with
selectinload() rather than relying on lazy loading, which isn't available
under async SQLAlchemy.
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Course(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Owner of this course
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    estimated_time: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    materials_needed: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
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
    user: Mapped["User"] = relationship(
        back_populates="courses",
    )
