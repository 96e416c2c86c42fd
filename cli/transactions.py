#!/usr/bin/env python3

import argparse
import asyncio
import sys

from dateutil.relativedelta import relativedelta

from cli.presentation import format_money, parse_month
from models.transaction import TransactionType
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List transactions, newest first.

    Args:
        args: Parsed command-line arguments with optional month and account
        services: Services container with transactions and accounts services
    """
    currency = services.config.default_currency
    account = None
    if args.account:
        account = asyncio.run(services.accounts.find_by_name(args.account))
        if not account:
            logger.error(f"Account '{args.account}' not found.")
            logger.info("Use 'python -m cli accounts list' to see available accounts.")
            sys.exit(1)
        logger.info(f"Filtering by account: {account.name}")
        currency = account.currency

    if args.month:
        try:
            start = parse_month(args.month)
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)
        logger.info(f"Transactions for {start.year}/{start.month:02d}")
        transactions = asyncio.run(
            services.transactions.find_by_date_range(
                start, start + relativedelta(months=1)
            )
        )
    else:
        transactions = asyncio.run(services.transactions.find_all())
        transactions = sorted(transactions, key=lambda t: t.date, reverse=True)

    if account:
        transactions = [t for t in transactions if t.account_id == account.id]

    if not transactions:
        logger.info("No transactions found.")
        return

    logger.info("=" * 80)
    for t in transactions:
        sign = "+" if t.type == TransactionType.INCOME else "-"
        recurring = " (recurring)" if t.recurring else ""
        logger.info(
            f"{t.date.date().isoformat()}  {sign}{format_money(t.amount, currency)}  "
            f"{t.category}  {t.description}{recurring}"
        )

    logger.info("=" * 80)
    logger.info(f"Total transactions: {len(transactions)}")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Show transactions",
        description="List income and expense transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions list
    list_parser = transactions_subparsers.add_parser(
        "list",
        help="List transactions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All transactions for October 2026
  python -m cli transactions list --month 2026/10

  # Transactions of one account
  python -m cli transactions list --account "Main Checking"
        """,
    )
    list_parser.add_argument(
        "--month",
        help="Month to list in YYYY/MM format (e.g., 2026/10 for October 2026)",
    )
    list_parser.add_argument(
        "--account",
        help="Filter by account name (exact match)",
    )
    list_parser.set_defaults(func=cmd_list)
