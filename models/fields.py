"""Parsing helpers shared by the models."""

from datetime import date, datetime, timezone
from decimal import DefaultContext, Decimal, InvalidOperation

# Amounts beyond this decimal exponent (either way) are rejected, so sums
# and ratios of accepted amounts stay inside the decimal context.
MAX_EXPONENT = DefaultContext.Emax // 3


def parse_decimal(value) -> Decimal:
    """Convert a numeric value to a finite Decimal.

    Floats go through str() so 0.1 stays 0.1.

    Raises:
        ValueError: If the value is not a finite number, or its magnitude
            is outside MAX_EXPONENT.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a number: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    if result and abs(result.adjusted()) > MAX_EXPONENT:
        raise ValueError(f"Number out of range: {value!r}")
    return result


def parse_datetime(value) -> datetime:
    """Convert an ISO 8601 string, date or datetime to a naive datetime.

    Timezone-aware values are converted to UTC and stored naive, so every
    timestamp in the app compares with every other.

    Raises:
        ValueError: If the value cannot be interpreted as a calendar timestamp.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        result = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"Not a date: {value!r}")

    if result.tzinfo is None:
        return result
    try:
        return result.astimezone(timezone.utc).replace(tzinfo=None)
    except OverflowError as e:
        raise ValueError(f"Date out of range: {value!r}") from e
