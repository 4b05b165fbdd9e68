"""
SQLAlchemy ORM models package.

All models are imported here so that Base.metadata knows about every table
before create_all() runs, and other modules can import from app.models
directly.
"""

from app.models.user import User  # noqa: F401
from app.models.course import Course  # noqa: F401
