#!/usr/bin/env python3
"""
Tally CLI - Command-line reports over accounts, transactions and budgets.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    accounts     Show accounts and balances
    categories   Show categories
    transactions Show transactions
    budgets      Show budgets and their utilization
    report       Dashboard summary, trends and breakdowns

Examples:
    python -m cli accounts list
    python -m cli budgets list --scoped
    python -m cli transactions list --month 2026/10
    python -m cli report summary
    python -m cli report trend --buckets 12 --unit month
"""

import sys
import argparse
from cli import accounts, budgets, categories, report, transactions
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Tally - Personal finance dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    accounts.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    budgets.setup_parser(subparsers)
    report.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Create services container for dependency injection
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
