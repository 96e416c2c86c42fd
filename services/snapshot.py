"""Point-in-time snapshots of all collections."""

import asyncio
from dataclasses import dataclass
from typing import Tuple

from models.account import Account
from models.budget import Budget
from models.category import Category
from models.transaction import Transaction
from logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of every collection, taken together."""

    accounts: Tuple[Account, ...] = ()
    transactions: Tuple[Transaction, ...] = ()
    categories: Tuple[Category, ...] = ()
    budgets: Tuple[Budget, ...] = ()


async def load_snapshot(services) -> Snapshot:
    """Fetch all collections concurrently.

    The four fetches are independent, so they run together and the call
    returns once all of them complete. If any fetch raises, the exception
    propagates and no snapshot is returned.

    Args:
        services: Services container.

    Returns:
        Snapshot holding the four collections.
    """
    accounts, transactions, categories, budgets = await asyncio.gather(
        services.accounts.find_all(),
        services.transactions.find_all(),
        services.categories.find_all(),
        services.budgets.find_all(),
    )

    logger.debug(
        f"Loaded snapshot: {len(accounts)} accounts, {len(transactions)} transactions, "
        f"{len(categories)} categories, {len(budgets)} budgets"
    )

    return Snapshot(
        accounts=accounts,
        transactions=transactions,
        categories=categories,
        budgets=budgets,
    )
