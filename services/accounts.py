"""Account service for the in-memory store."""

from typing import Dict, Optional

from models.account import Account, AccountType, AccountUpdate
from services.records import RecordService, merge, patch_fields
from services.validation import (
    raise_if_errors,
    require_decimal,
    require_enum,
    require_text,
)


class AccountService(RecordService):
    """Service for managing accounts."""

    table = "accounts"
    entity = "Account"

    async def find_by_name(self, name: str) -> Optional[Account]:
        """Get a single account by name.

        Args:
            name: The account name to find (case-sensitive).

        Returns:
            Account object if found, None otherwise.
        """
        matches = await self._select(lambda account: account.name == name)
        return matches[0] if matches else None

    async def create(
        self,
        name: str,
        account_type,
        balance,
        currency: str = "USD",
        color: str = "#2563EB",
    ) -> Account:
        """Create a new account.

        Args:
            name: Display name, must not be blank.
            account_type: AccountType or its value ("checking", "savings", "credit").
            balance: Current balance; the owed amount for credit accounts.
            currency: ISO currency code.
            color: Hex color for the presentation layer.

        Returns:
            The created Account object with id populated.

        Raises:
            ValidationError: If any field is rejected.
        """
        fields = _validate(
            {
                "name": name,
                "type": account_type,
                "balance": balance,
                "currency": currency,
                "color": color,
            }
        )
        await self.store.simulate_latency()
        return self._insert(lambda account_id: Account(id=account_id, **fields))

    async def update(self, account_id: int, patch: AccountUpdate) -> Account:
        """Apply a patch to an existing account.

        Args:
            account_id: The account ID to update.
            patch: Fields to change; None fields are left as they are.

        Returns:
            The updated Account object.

        Raises:
            ValidationError: If any patched field is rejected.
            NotFoundError: If the account does not exist.
        """
        changes = _validate(patch_fields(patch))
        await self.store.simulate_latency()
        return self._store(merge(self._current(account_id), changes))


def _validate(changes: Dict[str, object]) -> Dict[str, object]:
    errors: Dict[str, str] = {}
    result = dict(changes)

    if "name" in changes:
        result["name"] = require_text(errors, "name", changes["name"], "Account name")
    if "type" in changes:
        result["type"] = require_enum(errors, "type", changes["type"], AccountType)
    if "balance" in changes:
        result["balance"] = require_decimal(
            errors, "balance", changes["balance"], "Balance amount"
        )
    if "currency" in changes:
        currency = require_text(errors, "currency", changes["currency"], "Currency")
        result["currency"] = currency.upper() if currency else None
    if "color" in changes:
        result["color"] = require_text(errors, "color", changes["color"], "Color")

    raise_if_errors(errors)
    return result
