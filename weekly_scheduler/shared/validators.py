"""Shared validation utilities"""

import re
import uuid
from typing import Optional

USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9]{3,30}")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")

MIN_PASSWORD_LENGTH = 6


def validate_uuid(value: str) -> bool:
    """Validate UUID format"""
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError):
        return False


def validate_username(username: Optional[str]) -> str:
    """
    Validate and normalize a username.

    Args:
        username: Requested username

    Returns:
        Lowercase username

    Raises:
        ValueError: If the username is not 3-30 alphanumeric characters
    """
    if not username or not username.strip():
        raise ValueError("Username is required")

    username = username.strip()

    if len(username) < 3:
        raise ValueError("Username must be at least 3 characters")
    if len(username) > 30:
        raise ValueError("Username must be at most 30 characters")
    if not USERNAME_PATTERN.fullmatch(username):
        raise ValueError("Username can only contain letters and numbers")

    return username.lower()


def is_valid_public_username(username: Optional[str]) -> bool:
    """Loose check used for public lookups (any alphanumeric string)"""
    return bool(username) and re.fullmatch(r"[a-zA-Z0-9]+", username) is not None


def validate_time_string(value: str) -> str:
    """
    Validate a 24h HH:MM time string.

    Raises:
        ValueError: If the value is not a valid time between 00:00 and 23:59
    """
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid time '{value}', expected HH:MM between 00:00 and 23:59")
    return value


def validate_optional_time(value: Optional[str]) -> Optional[str]:
    """Validate an end time where empty means open-ended. Returns None for open-ended."""
    if value is None or value == "":
        return None
    return validate_time_string(value)


def validate_new_password(new_password: str, confirm_password: Optional[str]) -> str:
    """
    Validate a password change request.

    Raises:
        ValueError: If passwords do not match or the password is too short
    """
    if confirm_password is not None and new_password != confirm_password:
        raise ValueError("Passwords do not match")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return new_password
