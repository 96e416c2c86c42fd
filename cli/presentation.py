"""Presentation attributes and formatting for CLI output.

Every account type, category type and budget status maps to an icon, a
color and a label. The tables are checked for completeness at import time,
so adding an enum member without a style fails immediately.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from models.account import AccountType
from models.category import CategoryType
from tools.budgets import BudgetStatus


@dataclass(frozen=True)
class Style:
    icon: str
    color: str
    label: str


ACCOUNT_TYPE_STYLES = {
    AccountType.CHECKING: Style("Banknote", "#2563EB", "Checking Account"),
    AccountType.SAVINGS: Style("PiggyBank", "#16A34A", "Savings Account"),
    AccountType.CREDIT: Style("CreditCard", "#DC2626", "Credit Card"),
}

CATEGORY_TYPE_STYLES = {
    CategoryType.INCOME: Style("TrendingUp", "#22C55E", "Income"),
    CategoryType.EXPENSE: Style("TrendingDown", "#EF4444", "Expense"),
}

BUDGET_STATUS_STYLES = {
    BudgetStatus.ON_TRACK: Style("CheckCircle", "#22C55E", "On Track"),
    BudgetStatus.NEAR: Style("AlertTriangle", "#F59E0B", "Nearly Exceeded"),
    BudgetStatus.OVER: Style("AlertCircle", "#EF4444", "Over Budget"),
    BudgetStatus.INVALID: Style("XCircle", "#6B7280", "Invalid Limit"),
}

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "CAD": "CA$"}


def _check_exhaustive(table: dict, enum) -> None:
    missing = [member.value for member in enum if member not in table]
    if missing:
        raise RuntimeError(f"No style for {enum.__name__} values: {missing}")


_check_exhaustive(ACCOUNT_TYPE_STYLES, AccountType)
_check_exhaustive(CATEGORY_TYPE_STYLES, CategoryType)
_check_exhaustive(BUDGET_STATUS_STYLES, BudgetStatus)


def format_money(amount: Decimal, currency: str = "USD") -> str:
    """Format an amount like "$1,234.50" or "-$20.00".

    Currencies without a known symbol are written as a suffix: "1,234.50 CHF".
    """
    value = Decimal(amount).quantize(Decimal("0.01"))
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{sign}{digits} {currency}"
    return f"{sign}{symbol}{digits}"


def parse_month(value: str) -> datetime:
    """Parse a month in YYYY/MM format to its first day.

    Raises:
        ValueError: If the value is not a valid YYYY/MM month.
    """
    try:
        year, month = value.split("/")
        return datetime(int(year), int(month), 1)
    except (AttributeError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid month '{value}', expected YYYY/MM") from e
