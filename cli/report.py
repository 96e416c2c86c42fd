#!/usr/bin/env python3

import asyncio
import sys
from datetime import datetime

from dateutil.relativedelta import relativedelta

from cli.presentation import BUDGET_STATUS_STYLES, format_money, parse_month
from services.snapshot import load_snapshot
from tools.dashboard import build_dashboard
from tools.periods import BUCKET_UNITS, bucket_bounds
from tools.transactions import compute_category_breakdown, compute_trend_series
from logger import get_logger

logger = get_logger()


def cmd_summary(args, services):
    """Show the dashboard: stats, top categories, budgets and trend."""
    config = services.config
    currency = config.default_currency
    snapshot = asyncio.run(load_snapshot(services))
    dashboard = build_dashboard(
        snapshot,
        trend_months=config.trend_months,
        recent_activity_size=config.recent_activity_size,
    )
    stats = dashboard.stats

    logger.info(f"\nDashboard ({dashboard.generated_at:%B %Y})")
    logger.info("=" * 80)
    logger.info(f"Total balance:    {format_money(stats.total_balance, currency)}")
    logger.info(f"Monthly income:   {format_money(stats.income, currency)}")
    logger.info(f"Monthly expenses: {format_money(stats.expenses, currency)}")
    logger.info(f"Net income:       {format_money(stats.net_income, currency)}")

    logger.info("\nSpending by category:")
    if not dashboard.category_breakdown:
        logger.info("  No expenses this month.")
    for entry in dashboard.category_breakdown:
        logger.info(f"  {entry.category:<20} {format_money(entry.amount, currency):>12}")

    logger.info("\nBudgets:")
    if not dashboard.budgets:
        logger.info("  No budgets.")
    for report in dashboard.budgets:
        utilization = report.current_period
        style = BUDGET_STATUS_STYLES[utilization.status]
        logger.info(
            f"  {report.budget.category:<20} {utilization.percentage:>6}%  {style.label}"
        )

    logger.info(f"\nLast {len(dashboard.trend)} months:")
    _log_trend(dashboard.trend, currency)


def cmd_trend(args, services):
    """Show income and expenses per bucket."""
    if args.buckets <= 0:
        logger.error("--buckets must be greater than 0")
        sys.exit(1)

    snapshot = asyncio.run(load_snapshot(services))
    trend = compute_trend_series(snapshot.transactions, args.buckets, args.unit)

    logger.info(f"\nIncome and expenses per {args.unit}:")
    logger.info("=" * 80)
    _log_trend(trend, services.config.default_currency)


def cmd_breakdown(args, services):
    """Show expenses by category for one month."""
    if args.month:
        try:
            start = parse_month(args.month)
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)
        end = start + relativedelta(months=1)
    else:
        start, end = bucket_bounds("month", datetime.now())

    snapshot = asyncio.run(load_snapshot(services))
    breakdown = compute_category_breakdown(
        snapshot.transactions, snapshot.categories, start, end
    )
    currency = services.config.default_currency

    logger.info(f"\nSpending by category for {start.year}/{start.month:02d}:")
    logger.info("=" * 80)
    if not breakdown:
        logger.info("No expenses found.")
        return

    total = sum(entry.amount for entry in breakdown)
    for entry in breakdown:
        share = entry.amount / total * 100
        logger.info(
            f"{entry.category:<20} {format_money(entry.amount, currency):>12}  "
            f"{share:5.1f}%  {entry.color}"
        )
    logger.info("-" * 80)
    logger.info(f"{'Total':<20} {format_money(total, currency):>12}")


def _log_trend(trend, currency):
    for point in trend:
        logger.info(
            f"  {point.label:<8} income {format_money(point.income, currency):>12}"
            f"   expenses {format_money(point.expenses, currency):>12}"
        )


def setup_parser(subparsers):
    """Setup report subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "report",
        help="Dashboard reports",
        description="Summaries, trends and category breakdowns",
    )

    report_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available report commands",
        dest="subcommand",
        required=True,
    )

    # report summary
    summary_parser = report_subparsers.add_parser(
        "summary", help="Show the dashboard summary"
    )
    summary_parser.set_defaults(func=cmd_summary)

    # report trend
    trend_parser = report_subparsers.add_parser(
        "trend", help="Show income and expenses over time"
    )
    trend_parser.add_argument(
        "--buckets",
        type=int,
        default=6,
        help="Number of periods to show, ending with the current one (default 6)",
    )
    trend_parser.add_argument(
        "--unit",
        choices=BUCKET_UNITS,
        default="month",
        help="Length of each period (default month)",
    )
    trend_parser.set_defaults(func=cmd_trend)

    # report breakdown
    breakdown_parser = report_subparsers.add_parser(
        "breakdown", help="Show expenses by category"
    )
    breakdown_parser.add_argument(
        "--month",
        help="Month in YYYY/MM format (default: current month)",
    )
    breakdown_parser.set_defaults(func=cmd_breakdown)
