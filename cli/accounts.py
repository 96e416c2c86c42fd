#!/usr/bin/env python3

import asyncio

from cli.presentation import ACCOUNT_TYPE_STYLES, format_money
from services.snapshot import load_snapshot
from tools.balances import compute_account_recent_activity, compute_total_balance
from tools.dashboard import AccountActivity
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all accounts with their latest activity."""
    snapshot = asyncio.run(load_snapshot(services))

    if not snapshot.accounts:
        logger.info("No accounts found.")
        return

    logger.info("\nAccounts:")
    logger.info("=" * 80)
    for account in snapshot.accounts:
        activity = AccountActivity(
            account=account,
            recent_transactions=tuple(
                compute_account_recent_activity(
                    account, snapshot.transactions, services.config.recent_activity_size
                )
            ),
        )
        style = ACCOUNT_TYPE_STYLES[account.type]

        logger.info(f"ID: {account.id}")
        logger.info(f"Name: {account.name}")
        logger.info(f"Type: {style.label}")
        logger.info(f"Balance: {format_money(account.balance, account.currency)}")

        last = activity.last_transaction
        if last:
            logger.info(
                f"Last transaction: {last.date.date().isoformat()} "
                f"{last.description or last.category} "
                f"({format_money(last.amount, account.currency)})"
            )
        logger.info("-" * 80)

    total = compute_total_balance(snapshot.accounts)
    logger.info(f"\nTotal accounts: {len(snapshot.accounts)}")
    logger.info(
        f"Total balance: {format_money(total, services.config.default_currency)}"
    )


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Show accounts",
        description="List financial accounts and their balances",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)
