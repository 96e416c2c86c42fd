from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from models.fields import parse_datetime, parse_decimal


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    id: int
    amount: Decimal  # always positive, direction comes from type
    type: TransactionType
    category: str  # name of a Category with the same type
    account_id: int
    date: datetime
    description: str = ""
    recurring: bool = False  # informational only

    def to_dict(self) -> dict:
        """Convert transaction to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "amount": str(self.amount),
            "type": self.type.value,
            "category": self.category,
            "account_id": self.account_id,
            "date": self.date.isoformat(),
            "description": self.description,
            "recurring": self.recurring,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build a transaction from a seed record.

        Raises:
            ValueError: If the amount, type or date cannot be parsed.
            KeyError: If a required field is missing.
        """
        return cls(
            id=int(data["id"]),
            amount=parse_decimal(data["amount"]),
            type=TransactionType(data["type"]),
            category=data["category"],
            account_id=int(data["account_id"]),
            date=parse_datetime(data["date"]),
            description=data.get("description") or "",
            recurring=bool(data.get("recurring", False)),
        )


@dataclass(frozen=True)
class TransactionUpdate:
    """Mutable transaction fields. Fields left as None are not changed."""

    amount: Optional[Decimal] = None
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    account_id: Optional[int] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    recurring: Optional[bool] = None
