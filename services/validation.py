"""Field validation shared by the data services.

Each helper checks one value, records a message in ``errors`` under the
field name when the value is rejected, and returns the normalized value
(or None when rejected).
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Type

from models.fields import parse_datetime, parse_decimal
from services.errors import ValidationError


def require_text(errors: Dict[str, str], field: str, value, label: str) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        errors[field] = f"{label} is required"
        return None
    return value.strip()


def require_decimal(
    errors: Dict[str, str], field: str, value, label: str, positive: bool = False
) -> Optional[Decimal]:
    try:
        amount = parse_decimal(value)
    except ValueError:
        errors[field] = f"Valid {label.lower()} is required"
        return None
    if positive and amount <= 0:
        errors[field] = f"{label} must be greater than 0"
        return None
    return amount


def require_enum(errors: Dict[str, str], field: str, value, enum: Type[Enum]):
    try:
        return enum(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum)
        errors[field] = f"Must be one of: {allowed}"
        return None


def require_datetime(errors: Dict[str, str], field: str, value, label: str):
    if value is None or value == "":
        errors[field] = f"{label} is required"
        return None
    try:
        return parse_datetime(value)
    except ValueError:
        errors[field] = f"{label} is not a valid date"
        return None


def require_id(errors: Dict[str, str], field: str, value, label: str) -> Optional[int]:
    if isinstance(value, bool):
        errors[field] = f"{label} is required"
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        errors[field] = f"{label} is required"
        return None


def raise_if_errors(errors: Dict[str, str]) -> None:
    if errors:
        raise ValidationError(errors)
