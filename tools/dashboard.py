"""Dashboard reports built from one snapshot.

Each report is derived from the snapshot alone, with an explicit reference
time, so building the same dashboard twice gives the same result.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from models.account import Account
from models.budget import Budget
from models.transaction import Transaction
from services.snapshot import Snapshot
from tools.balances import compute_account_recent_activity, compute_total_balance
from tools.budgets import (
    BudgetUtilization,
    compute_budget_utilization,
    compute_period_budget_utilization,
)
from tools.periods import bucket_bounds
from tools.transactions import (
    CategorySpend,
    TrendPoint,
    compute_category_breakdown,
    compute_period_totals,
    compute_trend_series,
)


@dataclass(frozen=True)
class DashboardStats:
    total_balance: Decimal
    income: Decimal
    expenses: Decimal
    net_income: Decimal


@dataclass(frozen=True)
class BudgetReport:
    budget: Budget
    lifetime: BudgetUtilization
    current_period: BudgetUtilization


@dataclass(frozen=True)
class AccountActivity:
    account: Account
    recent_transactions: Tuple[Transaction, ...]

    @property
    def last_transaction(self) -> Optional[Transaction]:
        return self.recent_transactions[-1] if self.recent_transactions else None


@dataclass(frozen=True)
class Dashboard:
    generated_at: datetime
    stats: DashboardStats
    category_breakdown: Tuple[CategorySpend, ...]
    trend: Tuple[TrendPoint, ...]
    budgets: Tuple[BudgetReport, ...]
    accounts: Tuple[AccountActivity, ...]


def compute_dashboard_stats(
    accounts, transactions, now: Optional[datetime] = None
) -> DashboardStats:
    """Total balance plus this month's income, expenses and net income."""
    now = datetime.now() if now is None else now
    month_start, month_end = bucket_bounds("month", now)
    totals = compute_period_totals(transactions, month_start, month_end)

    return DashboardStats(
        total_balance=compute_total_balance(accounts),
        income=totals.income,
        expenses=totals.expenses,
        net_income=totals.net,
    )


def build_dashboard(
    snapshot: Snapshot,
    now: Optional[datetime] = None,
    trend_months: int = 6,
    recent_activity_size: int = 7,
) -> Dashboard:
    """Run every aggregation over one snapshot.

    Args:
        snapshot: Collections to report on.
        now: Reference time; defaults to the current time.
        trend_months: Number of monthly buckets in the trend series.
        recent_activity_size: Transactions sampled per account.

    Returns:
        Dashboard with stats, this month's category breakdown, the monthly
        trend, a report per budget and recent activity per account.
    """
    now = datetime.now() if now is None else now
    month_start, month_end = bucket_bounds("month", now)
    transactions = snapshot.transactions

    budgets = tuple(
        BudgetReport(
            budget=budget,
            lifetime=compute_budget_utilization(budget, transactions),
            current_period=compute_period_budget_utilization(budget, transactions, now),
        )
        for budget in snapshot.budgets
    )

    accounts = tuple(
        AccountActivity(
            account=account,
            recent_transactions=tuple(
                compute_account_recent_activity(
                    account, transactions, recent_activity_size
                )
            ),
        )
        for account in snapshot.accounts
    )

    return Dashboard(
        generated_at=now,
        stats=compute_dashboard_stats(snapshot.accounts, transactions, now),
        category_breakdown=tuple(
            compute_category_breakdown(
                transactions, snapshot.categories, month_start, month_end
            )
        ),
        trend=tuple(compute_trend_series(transactions, trend_months, "month", now)),
        budgets=budgets,
        accounts=accounts,
    )
