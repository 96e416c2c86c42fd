"""Calendar buckets used for period totals, trends and budget windows."""

from datetime import datetime, timedelta
from typing import Tuple

from dateutil.relativedelta import relativedelta

from models.budget import BudgetPeriod
from tools.common import as_timestamp

BUCKET_UNITS = ("day", "week", "month", "year")

_STEPS = {
    "day": relativedelta(days=1),
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}

_LABEL_FORMATS = {
    "day": "%b %d",
    "week": "%b %d",
    "month": "%b",
    "year": "%Y",
}


def bucket_start(unit: str, at) -> datetime:
    """Get the start of the calendar bucket containing a timestamp.

    Weeks start on Monday.

    Raises:
        ValueError: If unit is not one of BUCKET_UNITS.
    """
    at = as_timestamp(at)
    day = datetime(at.year, at.month, at.day)

    if unit == "day":
        return day
    if unit == "week":
        return day - timedelta(days=day.weekday())
    if unit == "month":
        return datetime(at.year, at.month, 1)
    if unit == "year":
        return datetime(at.year, 1, 1)
    raise ValueError(f"Unsupported bucket unit: {unit!r} (expected one of {BUCKET_UNITS})")


def bucket_step(unit: str) -> relativedelta:
    """Get the length of one bucket."""
    if unit not in _STEPS:
        raise ValueError(f"Unsupported bucket unit: {unit!r} (expected one of {BUCKET_UNITS})")
    return _STEPS[unit]


def bucket_bounds(unit: str, at) -> Tuple[datetime, datetime]:
    """Get the [start, end) range of the bucket containing a timestamp."""
    start = bucket_start(unit, at)
    return start, start + bucket_step(unit)


def bucket_label(unit: str, start: datetime) -> str:
    """Short label for a bucket, e.g. "Oct" for a month."""
    return start.strftime(_LABEL_FORMATS[unit])


def budget_window(period, now) -> Tuple[datetime, datetime]:
    """Get the current calendar window of a budget period.

    Monthly budgets cover the month containing now, yearly budgets the year.
    Anything that is not a known period is treated as monthly.
    """
    try:
        period = BudgetPeriod(period)
    except ValueError:
        period = BudgetPeriod.MONTHLY

    unit = "year" if period == BudgetPeriod.YEARLY else "month"
    return bucket_bounds(unit, now)
