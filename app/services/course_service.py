"""
Course service — business logic for course operations.

This module handles:
  - Listing and fetching courses with their owner eager-loaded
  - Course creation (owner must exist)
  - Full-replace updates of the four content fields
  - Deletion

Ownership:
  Any authenticated user may update or delete any course. The router only
  requires that a caller is authenticated; nothing here compares the
  course's user_id with the caller.

Ids arrive from the URL as strings. Anything that isn't a positive integer
can't name a course, so it is reported as not found rather than as a
validation error.
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import CourseNotFoundError, OwnerNotFoundError
from app.models.course import Course
from app.models.user import User


# SQLite integer primary keys are signed 64-bit
MAX_COURSE_ID = 2**63 - 1


def _parse_course_id(course_id: str) -> int:
    if not (course_id.isascii() and course_id.isdigit()) or int(course_id) > MAX_COURSE_ID:
        raise CourseNotFoundError(course_id)
    return int(course_id)


async def list_courses(db: AsyncSession) -> list[Course]:
    """List every course, oldest first, with its owner loaded."""
    result = await db.execute(
        select(Course).options(selectinload(Course.user)).order_by(Course.id)
    )
    return list(result.scalars().all())


async def get_course(db: AsyncSession, course_id: str) -> Course:
    """
    Get a single course with its owner loaded.

    Raises:
        CourseNotFoundError: If no course has this id.
    """
    result = await db.execute(
        select(Course)
        .options(selectinload(Course.user))
        .where(Course.id == _parse_course_id(course_id))
    )
    course = result.scalar_one_or_none()

    if course is None:
        raise CourseNotFoundError(course_id)

    return course


async def create_course(
    db: AsyncSession,
    user_id: int,
    title: str,
    description: str,
    estimated_time: str | None = None,
    materials_needed: str | None = None,
) -> Course:
    """
    Create a new course owned by `user_id`.

    Raises:
        OwnerNotFoundError: If `user_id` doesn't reference an existing user.
    """
    if await db.get(User, user_id) is None:
        raise OwnerNotFoundError(user_id)

    course = Course(
        user_id=user_id,
        title=title,
        description=description,
        estimated_time=estimated_time,
        materials_needed=materials_needed,
    )
    db.add(course)
    await db.flush()
    return course


async def update_course(
    db: AsyncSession,
    course_id: str,
    title: str,
    description: str,
    estimated_time: str | None,
    materials_needed: str | None,
) -> Course:
    """
    Overwrite a course's content fields.

    This is a full replace: optional fields passed as None are cleared.

    Raises:
        CourseNotFoundError: If no course has this id.
    """
    course = await get_course(db, course_id)

    course.title = title
    course.description = description
    course.estimated_time = estimated_time
    course.materials_needed = materials_needed

    await db.flush()
    return course


async def delete_course(db: AsyncSession, course_id: str) -> None:
    """
    Delete a course by id.

    Raises:
        CourseNotFoundError: If no course has this id.
    """
    course = await get_course(db, course_id)
    await db.execute(delete(Course).where(Course.id == course.id))
    await db.flush()
