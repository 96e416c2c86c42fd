"""Budget utilization: how much of each budget's limit has been spent."""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Iterable, Optional

from models.budget import Budget
from models.transaction import Transaction, TransactionType
from tools.common import amount_of, require_collection, timestamp_of
from tools.periods import budget_window

# Fractions of the limit at which a budget is reported as near or over
NEAR_THRESHOLD = Decimal("0.8")
OVER_THRESHOLD = Decimal("1.0")

_HUNDRED = Decimal("100")
_CENT = Decimal("0.01")


class BudgetStatus(str, Enum):
    ON_TRACK = "on-track"
    NEAR = "near"
    OVER = "over"
    INVALID = "invalid"


@dataclass(frozen=True)
class BudgetUtilization:
    spent: Decimal
    remaining: Decimal
    percentage: Decimal  # capped at 100, two decimal places
    status: BudgetStatus


def compute_budget_utilization(
    budget: Budget, transactions: Iterable[Transaction]
) -> BudgetUtilization:
    """Utilization of a budget over every matching expense ever recorded.

    The budget's period is not applied: spent is the sum of all expense
    transactions in the budget's category. Use
    compute_period_budget_utilization to count only the current window.
    """
    require_collection("transactions", transactions)
    return _utilization(budget, _spent(budget, transactions))


def compute_period_budget_utilization(
    budget: Budget,
    transactions: Iterable[Transaction],
    now: Optional[datetime] = None,
) -> BudgetUtilization:
    """Utilization of a budget within its current calendar window.

    Monthly budgets count expenses from the current month, yearly budgets
    from the current year.
    """
    require_collection("transactions", transactions)
    now = datetime.now() if now is None else now
    start, end = budget_window(getattr(budget, "period", None), now)
    return _utilization(budget, _spent(budget, transactions, start, end))


def _spent(budget: Budget, transactions, start=None, end=None) -> Decimal:
    category = getattr(budget, "category", None)
    spent = Decimal("0")

    for transaction in transactions:
        if getattr(transaction, "type", None) != TransactionType.EXPENSE:
            continue
        if getattr(transaction, "category", None) != category:
            continue
        amount = amount_of(getattr(transaction, "amount", None))
        if amount is None:
            continue
        if start is not None:
            ts = timestamp_of(getattr(transaction, "date", None))
            if ts is None or not start <= ts < end:
                continue
        spent += amount

    return spent


def _utilization(budget: Budget, spent: Decimal) -> BudgetUtilization:
    limit = amount_of(getattr(budget, "limit", None), positive=False)

    if limit is None or limit <= 0:
        return BudgetUtilization(
            spent=spent,
            remaining=Decimal("0"),
            percentage=Decimal("0"),
            status=BudgetStatus.INVALID,
        )

    ratio = spent / limit
    if ratio >= OVER_THRESHOLD:
        status = BudgetStatus.OVER
    elif ratio >= NEAR_THRESHOLD:
        status = BudgetStatus.NEAR
    else:
        status = BudgetStatus.ON_TRACK

    percentage = min(ratio * _HUNDRED, _HUNDRED).quantize(_CENT, rounding=ROUND_HALF_UP)

    return BudgetUtilization(
        spent=spent,
        remaining=max(limit - spent, Decimal("0")),
        percentage=percentage,
        status=status,
    )
