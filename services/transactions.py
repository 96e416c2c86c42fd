"""Transaction service for the in-memory store."""

from datetime import datetime
from typing import Dict, Tuple

from models.transaction import Transaction, TransactionType, TransactionUpdate
from services.records import RecordService, merge, patch_fields
from services.validation import (
    raise_if_errors,
    require_datetime,
    require_decimal,
    require_enum,
    require_id,
    require_text,
)


class TransactionService(RecordService):
    """Service for managing transactions."""

    table = "transactions"
    entity = "Transaction"

    async def find_by_account(self, account_id: int) -> Tuple[Transaction, ...]:
        """Get all transactions for a specific account.

        Args:
            account_id: The account ID to filter by.

        Returns:
            Transactions ordered by date (newest first), then id.
        """
        transactions = await self._select(lambda t: t.account_id == account_id)
        return _newest_first(transactions)

    async def find_by_date_range(
        self, start: datetime, end: datetime
    ) -> Tuple[Transaction, ...]:
        """Get transactions dated within [start, end).

        Returns:
            Transactions ordered by date (newest first), then id.
        """
        transactions = await self._select(lambda t: start <= t.date < end)
        return _newest_first(transactions)

    async def create(
        self,
        amount,
        transaction_type,
        category: str,
        account_id: int,
        date,
        description: str = "",
        recurring: bool = False,
    ) -> Transaction:
        """Create a new transaction.

        Args:
            amount: Positive magnitude of the transaction.
            transaction_type: TransactionType or its value ("income", "expense").
            category: Name of the category.
            account_id: ID of the account the transaction belongs to. Not
                checked against the account service.
            date: datetime, date or ISO 8601 string.
            description: Optional free text.
            recurring: Informational flag.

        Returns:
            The created Transaction object with id populated.

        Raises:
            ValidationError: If any field is rejected.
        """
        fields = _validate(
            {
                "amount": amount,
                "type": transaction_type,
                "category": category,
                "account_id": account_id,
                "date": date,
                "description": description,
                "recurring": recurring,
            }
        )
        await self.store.simulate_latency()
        return self._insert(
            lambda transaction_id: Transaction(id=transaction_id, **fields)
        )

    async def update(
        self, transaction_id: int, patch: TransactionUpdate
    ) -> Transaction:
        """Apply a patch to an existing transaction.

        Raises:
            ValidationError: If any patched field is rejected.
            NotFoundError: If the transaction does not exist.
        """
        changes = _validate(patch_fields(patch))
        await self.store.simulate_latency()
        return self._store(merge(self._current(transaction_id), changes))


def _newest_first(transactions) -> Tuple[Transaction, ...]:
    ordered = sorted(transactions, key=lambda t: t.id)
    return tuple(sorted(ordered, key=lambda t: t.date, reverse=True))


def _validate(changes: Dict[str, object]) -> Dict[str, object]:
    errors: Dict[str, str] = {}
    result = dict(changes)

    if "amount" in changes:
        result["amount"] = require_decimal(
            errors, "amount", changes["amount"], "Amount", positive=True
        )
    if "type" in changes:
        result["type"] = require_enum(errors, "type", changes["type"], TransactionType)
    if "category" in changes:
        result["category"] = require_text(
            errors, "category", changes["category"], "Category"
        )
    if "account_id" in changes:
        result["account_id"] = require_id(
            errors, "account_id", changes["account_id"], "Account"
        )
    if "date" in changes:
        result["date"] = require_datetime(errors, "date", changes["date"], "Date")
    if "description" in changes:
        result["description"] = str(changes["description"]).strip()
    if "recurring" in changes:
        result["recurring"] = bool(changes["recurring"])

    raise_if_errors(errors)
    return result
