"""
Custom exception classes and FastAPI exception handlers.

The service layer raises domain-specific errors (like CourseNotFoundError)
without importing HTTP concepts. The handlers registered here translate
them into JSON responses, so every endpoint reports errors the same way:

    {"message": "Course was not found"}
    {"message": "Validation error", "errors": ["Title is required"]}

Exception hierarchy:
    CourseAPIError (base)
    ├── UnauthenticatedError      — 401, Basic-Auth credential failures
    │   ├── MissingCredentialsError
    │   ├── UserNotFoundError
    │   └── InvalidCredentialsError
    ├── NotFoundError             — 404, missing resource
    │   ├── CourseNotFoundError
    │   └── CurrentUserNotFoundError
    └── ValidationFailedError     — 400, per-field messages
        ├── DuplicateEmailError
        └── OwnerNotFoundError

Anything else falls through to two last-resort handlers: store errors
(SQLAlchemyError) become a generic 500, and every other uncaught exception
reaches the terminal handler, which honours a status_code/status attribute
on the error and optionally logs the stack trace.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something broke on our end. Try again later."


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class CourseAPIError(Exception):
    """Base exception for all Course Catalog API domain errors."""

    status_code: int = 500

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# 401: authentication
# ---------------------------------------------------------------------------

class UnauthenticatedError(CourseAPIError):
    """Raised when a guarded request can't be tied to a known user."""

    status_code = 401


class MissingCredentialsError(UnauthenticatedError):
    """The Authorization header is absent, not Basic, or malformed."""

    def __init__(self):
        super().__init__("Access Denied: Missing credentials")


class UserNotFoundError(UnauthenticatedError):
    """No user has the email address given as the Basic-Auth username."""

    def __init__(self):
        super().__init__("Access Denied: User not found")


class InvalidCredentialsError(UnauthenticatedError):
    """The password doesn't match the stored hash."""

    def __init__(self):
        super().__init__("Access Denied: Invalid credentials")


# ---------------------------------------------------------------------------
# 404: missing resources
# ---------------------------------------------------------------------------

class NotFoundError(CourseAPIError):
    status_code = 404


class CourseNotFoundError(NotFoundError):
    """Raised when a requested course does not exist."""

    def __init__(self, course_id):
        self.course_id = course_id
        super().__init__("Course was not found")


class CurrentUserNotFoundError(NotFoundError):
    """
    Raised when the authenticated user vanishes before the handler re-reads it.

    Only reachable if the row is deleted between authentication and the
    handler's own query.
    """

    def __init__(self, email_address: str):
        self.email_address = email_address
        super().__init__("User not found")


# ---------------------------------------------------------------------------
# 400: validation
# ---------------------------------------------------------------------------

class ValidationFailedError(CourseAPIError):
    """
    Raised when input passes schema validation but violates a store rule.

    Attributes:
        errors: One human-readable message per offending field.
    """

    status_code = 400

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Validation error")


class DuplicateEmailError(ValidationFailedError):
    """Raised when creating a user with an email address that's already taken."""

    def __init__(self, email_address: str):
        self.email_address = email_address
        super().__init__([f"Email address {email_address} is already in use"])


class OwnerNotFoundError(ValidationFailedError):
    """Raised when a course names a userId that doesn't exist."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__([f"User {user_id} does not exist"])


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _validation_response(errors: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "errors": errors},
    )


def _format_request_error(error: dict) -> str:
    # Custom field errors already carry a complete sentence; pydantic's own
    # messages get the field name prefixed so the client knows which one failed.
    if error["type"] in ("missing_value", "empty_value"):
        return error["msg"]
    field = next(
        (str(part) for part in reversed(error["loc"]) if isinstance(part, str) and part != "body"),
        None,
    )
    if field is None:
        return error["msg"]
    return f"{field}: {error['msg']}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    This is called once during app startup in main.py.
    """

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(
        request: Request, exc: ValidationFailedError
    ) -> JSONResponse:
        return _validation_response(exc.errors)

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(
        request: Request, exc: UnauthenticatedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers={"WWW-Authenticate": "Basic"},
        )

    @app.exception_handler(CourseAPIError)
    async def course_api_error_handler(
        request: Request, exc: CourseAPIError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Body schemas reject bad input before any store call; report it in
        # the same shape as store-level validation failures.
        return _validation_response([_format_request_error(e) for e in exc.errors()])

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # The router raises 404 for unknown paths and 405 for known paths
        # with an undeclared method. Both mean "no route handles this".
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"message": "Route Not Found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.exception("Store error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})

    @app.exception_handler(Exception)
    async def global_error_handler(request: Request, exc: Exception) -> JSONResponse:
        if settings.ENABLE_GLOBAL_ERROR_LOGGING:
            logger.error("Global error handler", exc_info=exc)

        status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None) or 500
        return JSONResponse(
            status_code=status_code,
            content={"message": str(exc), "error": {}},
        )
