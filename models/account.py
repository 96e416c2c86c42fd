from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from models.fields import parse_decimal


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"


@dataclass(frozen=True)
class Account:
    id: int
    name: str  # human readable, e.g., "Main Checking"
    type: AccountType
    balance: Decimal  # owed amount for credit accounts, held funds otherwise
    currency: str = "USD"
    color: str = "#2563EB"

    @property
    def is_liability(self) -> bool:
        return self.type == AccountType.CREDIT

    def to_dict(self) -> dict:
        """Convert account to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "balance": str(self.balance),
            "currency": self.currency,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Account":
        """Build an account from a seed record.

        Raises:
            ValueError: If the type or balance cannot be parsed.
            KeyError: If a required field is missing.
        """
        return cls(
            id=int(data["id"]),
            name=data["name"],
            type=AccountType(data["type"]),
            balance=parse_decimal(data["balance"]),
            currency=data.get("currency") or "USD",
            color=data.get("color") or "#2563EB",
        )


@dataclass(frozen=True)
class AccountUpdate:
    """Mutable account fields. Fields left as None are not changed."""

    name: Optional[str] = None
    type: Optional[AccountType] = None
    balance: Optional[Decimal] = None
    currency: Optional[str] = None
    color: Optional[str] = None
