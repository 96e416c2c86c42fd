#!/usr/bin/env python3

import asyncio

from cli.presentation import BUDGET_STATUS_STYLES, format_money
from services.snapshot import load_snapshot
from tools.budgets import compute_budget_utilization, compute_period_budget_utilization
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List budgets with spending against each limit.

    By default spending counts every matching expense. With --scoped only
    the budget's current month or year is counted.
    """
    snapshot = asyncio.run(load_snapshot(services))
    currency = services.config.default_currency

    if not snapshot.budgets:
        logger.info("No budgets found.")
        return

    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for budget in snapshot.budgets:
        if args.scoped:
            utilization = compute_period_budget_utilization(
                budget, snapshot.transactions
            )
        else:
            utilization = compute_budget_utilization(budget, snapshot.transactions)
        style = BUDGET_STATUS_STYLES[utilization.status]

        logger.info(f"ID: {budget.id}")
        logger.info(f"Category: {budget.category} ({budget.period.value})")
        logger.info(
            f"Spent: {format_money(utilization.spent, currency)} of "
            f"{format_money(budget.limit, currency)} ({utilization.percentage}%)"
        )
        logger.info(f"Remaining: {format_money(utilization.remaining, currency)}")
        logger.info(f"Status: {style.label}")
        logger.info("-" * 80)

    logger.info(f"\nTotal budgets: {len(snapshot.budgets)}")


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Show budgets",
        description="List budgets and how much of each limit is spent",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    # budgets list
    list_parser = budgets_subparsers.add_parser(
        "list", help="List budgets with utilization"
    )
    list_parser.add_argument(
        "--scoped",
        action="store_true",
        help="Only count expenses in each budget's current month or year",
    )
    list_parser.set_defaults(func=cmd_list)
