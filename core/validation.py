"""Field validation helpers shared by the post and user domains."""

import re
import uuid
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def is_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def check_min_length(
    errors: List[FieldError],
    field: str,
    value: Optional[str],
    min_length: int,
    message: str,
) -> None:
    """Append an error when value is empty or shorter than min_length."""
    if is_empty(value) or len(value) < min_length:
        errors.append(FieldError(field=field, message=message))


def check_required(errors: List[FieldError], field: str, value: Optional[str], message: str) -> None:
    if is_empty(value):
        errors.append(FieldError(field=field, message=message))


def check_email(errors: List[FieldError], field: str, value: Optional[str], message: str) -> None:
    if is_empty(value) or not _EMAIL_PATTERN.match(value):
        errors.append(FieldError(field=field, message=message))


def parse_uuid(value: Any) -> Optional[uuid.UUID]:
    """Parse an id; None when it is not a UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        return None


__all__ = [
    "FieldError",
    "is_empty",
    "check_min_length",
    "check_required",
    "check_email",
    "parse_uuid",
]
