"""
Pydantic schemas for Course endpoints.

Create and update share the same content rules: title and description are
required and non-empty, estimatedTime and materialsNeeded are optional.
Update is a full replace, so an optional field left out of a PUT body is
cleared rather than kept.

Every course response embeds its owner under the "User" key, restricted to
firstName, lastName and emailAddress.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.fields import require_text

FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
}

# SQLite integer primary keys are signed 64-bit
MAX_USER_ID = 2**63 - 1


class CourseContent(BaseModel):
    """The four mutable course fields, shared by create and update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(default=None, validate_default=True)
    description: str = Field(default=None, validate_default=True)
    estimated_time: str | None = None
    materials_needed: str | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def check_required(cls, value, info: ValidationInfo):
        return require_text(value, FIELD_LABELS[info.field_name])


class CourseCreateRequest(CourseContent):
    """Request body for POST /api/courses."""
    # Owner of the new course; defaults to the authenticated user when omitted
    user_id: int | None = Field(default=None, ge=1, le=MAX_USER_ID)


class CourseUpdateRequest(CourseContent):
    """Request body for PUT /api/courses/{course_id}."""
    pass


class CourseOwner(BaseModel):
    """Restricted projection of the owning User."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    first_name: str
    last_name: str
    email_address: str


class CourseResponse(BaseModel):
    """Public representation of a course, with its owner's projection."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    title: str
    description: str
    estimated_time: str | None
    materials_needed: str | None
    user_id: int
    created_at: datetime
    updated_at: datetime
    user: CourseOwner = Field(alias="User")
