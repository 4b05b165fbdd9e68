"""
Pydantic schemas for User requests and responses.

JSON field names are camelCase on the wire (firstName, emailAddress, ...);
the Python attributes stay snake_case. Request bodies accept either form.

hashed_password is NEVER included in any response schema — this is a
critical security boundary.
"""

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.schemas.fields import require_text

# Labels used in "<label> is required" / "<label> cannot be empty" messages
FIELD_LABELS = {
    "first_name": "First name",
    "last_name": "Last name",
    "email_address": "Email address",
    "password": "Password",
}


class UserCreateRequest(BaseModel):
    """Request body for POST /api/users."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = Field(default=None, validate_default=True)
    last_name: str = Field(default=None, validate_default=True)
    email_address: str = Field(default=None, validate_default=True)
    password: str = Field(default=None, validate_default=True)

    @field_validator("first_name", "last_name", "email_address", "password", mode="before")
    @classmethod
    def check_required(cls, value, info: ValidationInfo):
        return require_text(value, FIELD_LABELS[info.field_name])

    @field_validator("email_address")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        # Format check only; the address is stored exactly as given because
        # the Basic-Auth username is matched against it verbatim.
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise PydanticCustomError(
                "value_error",
                "value is not a valid email address: {reason}",
                {"reason": str(exc)},
            )
        return value


class UserResponse(BaseModel):
    """Public representation of a User (never includes the password hash)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str
    email_address: str
    created_at: datetime
    updated_at: datetime
