"""
Input validation utilities.
"""

import re
from typing import Any

from elastic_wrapper.exceptions import InvalidArgumentError


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_text(value: Any, message: str) -> str:
    """
    Ensure a string argument is neither None nor blank.

    Args:
        value: Value to check
        message: Error message used when the check fails

    Returns:
        The value unchanged

    Raises:
        InvalidArgumentError: If value is None or blank
    """
    if is_blank(value):
        raise InvalidArgumentError(message)
    return value


def require_not_none(value: Any, message: str) -> Any:
    """
    Ensure an argument is not None.

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(message)
    return value


def validate_field_name(field: str) -> str:
    return require_text(field, "Field name cannot be empty")


def validate_value(value: Any) -> Any:
    if is_blank(value):
        raise InvalidArgumentError("Query value cannot be empty")
    return value


def validate_path(path: str) -> str:
    return require_text(path, "Nested path cannot be empty")


def validate_query(query: Any) -> Any:
    return require_not_none(query, "Query cannot be None")


def validate_index_name(index: str) -> None:
    """
    Validate an Elasticsearch index name or pattern.

    Args:
        index: Index name to validate

    Raises:
        InvalidArgumentError: If the name is empty or has invalid characters
    """
    if is_blank(index):
        raise InvalidArgumentError("Index name cannot be empty")

    if index.startswith(("_", "-", "+")):
        raise InvalidArgumentError("Index name cannot start with '_', '-' or '+'")

    invalid_chars = re.findall(r'[\\/"<>| ,#:]', index)
    if invalid_chars:
        raise InvalidArgumentError(f"Invalid characters in index name: {invalid_chars}")


def validate_size(size: int, max_size: int = 10000) -> int:
    """
    Validate and clamp a result size.

    Args:
        size: Requested size
        max_size: Maximum allowed size

    Returns:
        Valid size value
    """
    return clamp_value(size, min_value=0, max_value=max_size)


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
