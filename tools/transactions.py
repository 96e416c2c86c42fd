"""Transaction analysis tools."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from models.category import Category, CategoryType
from models.transaction import Transaction, TransactionType
from tools.common import amount_of, as_timestamp, require_collection, timestamp_of
from tools.periods import bucket_label, bucket_start, bucket_step

FALLBACK_COLOR = "#6B7280"
UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class PeriodTotals:
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class CategorySpend:
    category: str
    amount: Decimal
    color: str


@dataclass(frozen=True)
class TrendPoint:
    label: str
    start: datetime
    income: Decimal
    expenses: Decimal


def dated_amounts(
    transactions: Iterable[Transaction],
) -> Iterable[Tuple[Transaction, datetime, Decimal]]:
    """Yield (transaction, timestamp, amount) for every usable transaction.

    Transactions whose date cannot be parsed or whose amount is not a
    positive number are skipped.
    """
    for transaction in transactions:
        ts = timestamp_of(getattr(transaction, "date", None))
        amount = amount_of(getattr(transaction, "amount", None))
        if ts is None or amount is None:
            continue
        yield transaction, ts, amount


def compute_period_totals(
    transactions: Iterable[Transaction], period_start, period_end
) -> PeriodTotals:
    """Sum income and expenses dated within [period_start, period_end).

    Args:
        transactions: Transactions to aggregate.
        period_start: Inclusive start (datetime, date or ISO string).
        period_end: Exclusive end.

    Returns:
        PeriodTotals with income, expenses and net (income - expenses).
    """
    require_collection("transactions", transactions)
    start = as_timestamp(period_start)
    end = as_timestamp(period_end)

    income_total = Decimal("0")
    expense_total = Decimal("0")

    for transaction, ts, amount in dated_amounts(transactions):
        if not start <= ts < end:
            continue
        if transaction.type == TransactionType.INCOME:
            income_total += amount
        elif transaction.type == TransactionType.EXPENSE:
            expense_total += amount

    return PeriodTotals(
        income=income_total,
        expenses=expense_total,
        net=income_total - expense_total,
    )


def compute_category_breakdown(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    period_start,
    period_end,
) -> List[CategorySpend]:
    """Break down expenses within [period_start, period_end) by category.

    Amounts are summed per category name and each entry gets the color of
    the matching expense category, or FALLBACK_COLOR if there is none.
    Transactions without a category name are grouped under UNCATEGORIZED.

    Returns:
        CategorySpend entries sorted by amount, largest first. Equal amounts
        keep the order in which their category was first seen.
    """
    require_collection("transactions", transactions)
    require_collection("categories", categories)
    start = as_timestamp(period_start)
    end = as_timestamp(period_end)

    expenses_by_category: Dict[str, Decimal] = {}
    for transaction, ts, amount in dated_amounts(transactions):
        if transaction.type != TransactionType.EXPENSE or not start <= ts < end:
            continue

        name = getattr(transaction, "category", None)
        if not isinstance(name, str) or not name:
            name = UNCATEGORIZED

        if name not in expenses_by_category:
            expenses_by_category[name] = Decimal("0")
        expenses_by_category[name] += amount

    colors = expense_colors(categories)
    breakdown = [
        CategorySpend(category=name, amount=total, color=colors.get(name, FALLBACK_COLOR))
        for name, total in expenses_by_category.items()
    ]
    # sorted() is stable with reverse=True, so ties keep first-seen order
    return sorted(breakdown, key=lambda entry: entry.amount, reverse=True)


def expense_colors(categories: Iterable[Category]) -> Dict[str, str]:
    """Map expense category names to colors.

    A category whose type is expense wins over one with no type at all;
    income categories are never used. The first match for a name wins.
    """
    typed: Dict[str, str] = {}
    untyped: Dict[str, str] = {}

    for category in categories:
        name = getattr(category, "name", None)
        color = getattr(category, "color", None) or FALLBACK_COLOR
        category_type = getattr(category, "type", None)
        if not isinstance(name, str):
            continue
        if category_type == CategoryType.EXPENSE:
            typed.setdefault(name, color)
        elif category_type is None:
            untyped.setdefault(name, color)

    return {**untyped, **typed}


def compute_trend_series(
    transactions: Iterable[Transaction],
    bucket_count: int,
    bucket_unit: str = "month",
    now: Optional[datetime] = None,
) -> List[TrendPoint]:
    """Income and expenses for the last bucket_count calendar buckets.

    The buckets are consecutive and end with the bucket containing now.
    Every bucket is reported, with zero totals when nothing falls in it.

    Args:
        transactions: Transactions to aggregate.
        bucket_count: Number of buckets to return.
        bucket_unit: "day", "week", "month" or "year".
        now: Reference time; defaults to the current time.

    Returns:
        TrendPoint entries, oldest first, exactly bucket_count long (empty
        when bucket_count is not positive).
    """
    require_collection("transactions", transactions)
    now = datetime.now() if now is None else now
    step = bucket_step(bucket_unit)

    if bucket_count <= 0:
        return []

    current = bucket_start(bucket_unit, now)
    starts = [current - step * offset for offset in range(bucket_count - 1, -1, -1)]
    index_by_start = {start: index for index, start in enumerate(starts)}

    income = [Decimal("0")] * bucket_count
    expenses = [Decimal("0")] * bucket_count

    for transaction, ts, amount in dated_amounts(transactions):
        index = index_by_start.get(bucket_start(bucket_unit, ts))
        if index is None:
            continue
        if transaction.type == TransactionType.INCOME:
            income[index] += amount
        elif transaction.type == TransactionType.EXPENSE:
            expenses[index] += amount

    return [
        TrendPoint(
            label=bucket_label(bucket_unit, start),
            start=start,
            income=income[index],
            expenses=expenses[index],
        )
        for index, start in enumerate(starts)
    ]
