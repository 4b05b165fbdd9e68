"""
Courses router.

Endpoints:
  GET    /api/courses              — List all courses (public)
  GET    /api/courses/{course_id}  — Get one course (public)
  POST   /api/courses              — Create a course (Basic Auth required)
  PUT    /api/courses/{course_id}  — Replace a course's content (Basic Auth required)
  DELETE /api/courses/{course_id}  — Delete a course (Basic Auth required)

Every course in a response carries its owner's first name, last name and
email address under "User". Write endpoints require authentication but not
ownership: any authenticated user can change any course.

course_id is declared as a string so that a non-numeric id is answered
with the usual 404 instead of a validation error.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.course import CourseCreateRequest, CourseResponse, CourseUpdateRequest
from app.services import course_service

router = APIRouter()


@router.get(
    "",
    response_model=list[CourseResponse],
    summary="List all courses",
)
async def list_courses(db: AsyncSession = Depends(get_db)):
    """List every course with its owner's name and email address."""
    return await course_service.list_courses(db)


@router.get(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Get course details",
)
async def get_course(course_id: str, db: AsyncSession = Depends(get_db)):
    """Get one course by id. Returns 404 if it doesn't exist."""
    return await course_service.get_course(db, course_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Create a course",
)
async def create_course(
    request: CourseCreateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new course.

    - **title** / **description**: Required, non-empty
    - **estimatedTime** / **materialsNeeded**: Optional
    - **userId**: Owner of the course; defaults to the authenticated user

    Responds 201 with an empty body and `Location: /api/courses/{id}`.
    """
    user_id = request.user_id if request.user_id is not None else current_user.id

    course = await course_service.create_course(
        db=db,
        user_id=user_id,
        title=request.title,
        description=request.description,
        estimated_time=request.estimated_time,
        materials_needed=request.materials_needed,
    )
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/api/courses/{course.id}"},
    )


@router.put(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Replace a course's content",
)
async def update_course(
    course_id: str,
    request: CourseUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Overwrite title, description, estimatedTime and materialsNeeded.

    This is a full replace, not a merge: optional fields left out of the
    body are cleared.
    """
    await course_service.update_course(
        db=db,
        course_id=course_id,
        title=request.title,
        description=request.description,
        estimated_time=request.estimated_time,
        materials_needed=request.materials_needed,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a course",
)
async def delete_course(
    course_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a course. Returns 404 if it doesn't exist."""
    await course_service.delete_course(db, course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
