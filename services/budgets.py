"""Budget service for the in-memory store."""

from datetime import datetime
from typing import Dict, Optional, Tuple

from models.budget import Budget, BudgetPeriod, BudgetUpdate
from services.records import RecordService, merge, patch_fields
from services.validation import (
    raise_if_errors,
    require_decimal,
    require_enum,
    require_text,
)


class BudgetService(RecordService):
    """Service for managing budgets.

    Budgets only store their limit; spending against them is derived by
    tools.budgets from transactions.
    """

    table = "budgets"
    entity = "Budget"

    async def find_by_category(self, category: str) -> Tuple[Budget, ...]:
        """Get all budgets for an expense category name, ordered by id."""
        return await self._select(lambda budget: budget.category == category)

    async def create(
        self,
        category: str,
        limit,
        period=BudgetPeriod.MONTHLY,
        start_date: Optional[datetime] = None,
    ) -> Budget:
        """Create a new budget.

        Args:
            category: Expense category name.
            limit: Spending limit, must be greater than 0.
            period: BudgetPeriod or its value ("monthly", "yearly").
            start_date: Defaults to now.

        Returns:
            The created Budget object with id populated.

        Raises:
            ValidationError: If any field is rejected.
        """
        fields = _validate({"category": category, "limit": limit, "period": period})
        fields["start_date"] = start_date or datetime.now()
        await self.store.simulate_latency()
        return self._insert(lambda budget_id: Budget(id=budget_id, **fields))

    async def update(self, budget_id: int, patch: BudgetUpdate) -> Budget:
        """Apply a patch to an existing budget.

        Raises:
            ValidationError: If any patched field is rejected.
            NotFoundError: If the budget does not exist.
        """
        changes = _validate(patch_fields(patch))
        await self.store.simulate_latency()
        return self._store(merge(self._current(budget_id), changes))


def _validate(changes: Dict[str, object]) -> Dict[str, object]:
    errors: Dict[str, str] = {}
    result = dict(changes)

    if "category" in changes:
        result["category"] = require_text(
            errors, "category", changes["category"], "Category"
        )
    if "limit" in changes:
        result["limit"] = require_decimal(
            errors, "limit", changes["limit"], "Budget limit", positive=True
        )
    if "period" in changes:
        result["period"] = require_enum(errors, "period", changes["period"], BudgetPeriod)

    raise_if_errors(errors)
    return result
