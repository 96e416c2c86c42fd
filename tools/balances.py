"""Account balance tools."""

from decimal import Decimal
from typing import Iterable, List

from models.account import Account, AccountType
from models.transaction import Transaction
from tools.common import amount_of, require_collection, timestamp_of


def compute_total_balance(accounts: Iterable[Account]) -> Decimal:
    """Net worth across accounts.

    Credit account balances are amounts owed, so they are subtracted; every
    other account type is added. Accounts with a non-numeric balance are
    skipped.
    """
    require_collection("accounts", accounts)
    total = Decimal("0")

    for account in accounts:
        balance = amount_of(getattr(account, "balance", None), positive=False)
        if balance is None:
            continue
        if getattr(account, "type", None) == AccountType.CREDIT:
            total -= balance
        else:
            total += balance

    return total


def compute_account_recent_activity(
    account: Account, transactions: Iterable[Transaction], sample_size: int = 7
) -> List[Transaction]:
    """The account's most recent transactions, in chronological order.

    Takes the sample_size newest transactions of the account and returns
    them oldest first, ready to plot as a short trend. Account ids are
    compared by their string form, so "3" and 3 refer to the same account.
    Transactions with an unparseable date are left out.
    """
    require_collection("transactions", transactions)
    if sample_size <= 0:
        return []

    account_id = str(getattr(account, "id", None))
    dated = []
    for transaction in transactions:
        if str(getattr(transaction, "account_id", None)) != account_id:
            continue
        ts = timestamp_of(getattr(transaction, "date", None))
        if ts is not None:
            dated.append((ts, transaction))

    newest_first = sorted(dated, key=lambda item: item[0], reverse=True)
    sample = [transaction for _, transaction in newest_first[:sample_size]]
    sample.reverse()
    return sample
