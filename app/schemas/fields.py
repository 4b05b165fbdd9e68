"""
Shared field rules for request schemas.

Required text fields are declared with a None default and
validate_default=True so that a missing key, an explicit null and an empty
string all reach the same validator and produce one readable message per
field, e.g. "Title is required" or "Title cannot be empty".
"""

from pydantic_core import PydanticCustomError


def require_text(value, label: str):
    """Reject None and blank strings; leave any other value to type validation."""
    if value is None:
        raise PydanticCustomError("missing_value", "{label} is required", {"label": label})
    if isinstance(value, str) and not value.strip():
        raise PydanticCustomError("empty_value", "{label} cannot be empty", {"label": label})
    return value
