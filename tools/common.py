"""Lenient value access shared by the aggregation tools.

Records handed to the tools may come from anywhere, so amounts and dates are
read defensively: a value that cannot be used yields None and the caller
leaves the record out of its result.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from models.fields import parse_datetime, parse_decimal


def amount_of(value, positive: bool = True) -> Optional[Decimal]:
    """Read a numeric value as a Decimal.

    Args:
        value: The raw amount.
        positive: If True, zero and negative amounts are rejected too.

    Returns:
        The Decimal, or None if the value is not usable.
    """
    try:
        amount = parse_decimal(value)
    except ValueError:
        return None
    if positive and amount <= 0:
        return None
    return amount


def timestamp_of(value) -> Optional[datetime]:
    """Read a calendar timestamp, or None if it cannot be parsed.

    Timezone-aware values are converted to naive UTC so they compare with
    naive period bounds.
    """
    try:
        return as_timestamp(value)
    except (TypeError, ValueError, OverflowError):
        return None


def as_timestamp(value) -> datetime:
    """Convert a datetime, date or ISO string to a naive datetime.

    Aware values come back as naive UTC.

    Raises:
        ValueError: If the value is not a calendar timestamp.
    """
    return parse_datetime(value)


def require_collection(name: str, value) -> None:
    """Reject a missing collection argument.

    Raises:
        TypeError: If value is None.
    """
    if value is None:
        raise TypeError(f"{name} must be a collection, not None")
