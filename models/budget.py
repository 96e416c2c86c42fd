"""Budget model: a spending limit for one expense category."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from models.fields import parse_datetime, parse_decimal


class BudgetPeriod(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Budget:
    """Represents a budget.

    The amount spent against a budget is not stored here; it is derived from
    transactions each time (see tools.budgets).

    Attributes:
        id: Unique identifier (assigned by the budget service).
        category: Name of the expense category the budget applies to.
        limit: Spending limit, expected to be greater than zero.
        period: Calendar window the limit refers to.
        start_date: When the budget was created.
    """

    id: int
    category: str
    limit: Decimal
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert budget to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "category": self.category,
            "limit": str(self.limit),
            "period": self.period.value,
            "start_date": self.start_date.isoformat() if self.start_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Budget":
        """Build a budget from a seed record."""
        start_date = data.get("start_date")
        return cls(
            id=int(data["id"]),
            category=data["category"],
            limit=parse_decimal(data["limit"]),
            period=BudgetPeriod(data.get("period") or "monthly"),
            start_date=parse_datetime(start_date) if start_date else None,
        )


@dataclass(frozen=True)
class BudgetUpdate:
    """Mutable budget fields. Fields left as None are not changed."""

    category: Optional[str] = None
    limit: Optional[Decimal] = None
    period: Optional[BudgetPeriod] = None
