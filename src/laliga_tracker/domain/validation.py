import re
from typing import Optional

from laliga_tracker.constants import (
    TIME_FORMAT_PATTERN,
    MSG_FIELDS_REQUIRED,
    MSG_INVALID_TIME_FORMAT,
)
from laliga_tracker.domain.errors import ValidationError

_TIME_FORMAT = re.compile(TIME_FORMAT_PATTERN)


def is_valid_time_format(value: Optional[str]) -> bool:
    """True if value is MM:SS with MM in 0-99 (one or two digits) and SS in 00-59."""
    if not isinstance(value, str):
        return False
    return _TIME_FORMAT.fullmatch(value) is not None


def require_fields(**fields) -> None:
    """Raise ValidationError if any of the given fields is None or empty."""
    if any(value is None or value == "" for value in fields.values()):
        raise ValidationError(MSG_FIELDS_REQUIRED)


def require_time_format(value: str) -> None:
    if not is_valid_time_format(value):
        raise ValidationError(MSG_INVALID_TIME_FORMAT)
