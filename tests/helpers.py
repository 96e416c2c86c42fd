"""Helper utilities for tests."""

from datetime import datetime
from decimal import Decimal, InvalidOperation

from models.account import Account, AccountType
from models.budget import Budget, BudgetPeriod
from models.category import Category, CategoryType
from models.transaction import Transaction, TransactionType


def _decimal(value):
    """Convert numeric strings to Decimal; anything else is passed through as-is."""
    if not isinstance(value, str):
        return value
    try:
        return Decimal(value)
    except InvalidOperation:
        return value


def make_account(id=1, balance="0", type=AccountType.CHECKING, name=None, **kwargs):
    return Account(
        id=id,
        name=name or f"Account {id}",
        type=type,
        balance=_decimal(balance),
        **kwargs,
    )


def make_transaction(
    id=1,
    amount="10.00",
    type=TransactionType.EXPENSE,
    category="Groceries",
    account_id=1,
    date=datetime(2026, 10, 5, 12, 0),
    **kwargs,
):
    return Transaction(
        id=id,
        amount=_decimal(amount),
        type=type,
        category=category,
        account_id=account_id,
        date=date,
        **kwargs,
    )


def make_category(id=1, name="Groceries", type=CategoryType.EXPENSE, color="#F59E0B"):
    return Category(id=id, name=name, type=type, color=color)


def make_budget(id=1, category="Groceries", limit="100", period=BudgetPeriod.MONTHLY):
    return Budget(
        id=id,
        category=category,
        limit=_decimal(limit),
        period=period,
    )
