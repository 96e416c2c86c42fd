"""Tests for transaction analysis tools."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from models.category import CategoryType
from models.transaction import TransactionType
from tests.helpers import make_category, make_transaction
from tools.transactions import (
    FALLBACK_COLOR,
    UNCATEGORIZED,
    CategorySpend,
    PeriodTotals,
    compute_category_breakdown,
    compute_period_totals,
    compute_trend_series,
)

NOW = datetime(2026, 10, 19, 12, 0)
OCTOBER = (datetime(2026, 10, 1), datetime(2026, 11, 1))


def income(id, amount, when, **kwargs):
    return make_transaction(
        id=id, amount=amount, type=TransactionType.INCOME, category="Salary", date=when, **kwargs
    )


def expense(id, amount, when, category="Groceries", **kwargs):
    return make_transaction(id=id, amount=amount, category=category, date=when, **kwargs)


class TestComputePeriodTotals:
    """Tests for compute_period_totals."""

    def test_sums_income_and_expenses(self):
        """Test totals and net for a single month."""
        transactions = [
            income(1, "5200.00", datetime(2026, 10, 1, 9)),
            expense(2, "1650.00", datetime(2026, 10, 1, 10)),
            expense(3, "132.48", datetime(2026, 10, 3)),
            income(4, "750.00", datetime(2026, 10, 9)),
        ]

        totals = compute_period_totals(transactions, *OCTOBER)

        assert totals == PeriodTotals(
            income=Decimal("5950.00"),
            expenses=Decimal("1782.48"),
            net=Decimal("4167.52"),
        )

    def test_period_is_half_open(self):
        """Test that the start is included and the end excluded."""
        transactions = [
            expense(1, "1", datetime(2026, 9, 30, 23, 59, 59)),
            expense(2, "2", datetime(2026, 10, 1)),
            expense(3, "4", datetime(2026, 10, 31, 23, 59, 59)),
            expense(4, "8", datetime(2026, 11, 1)),
        ]

        totals = compute_period_totals(transactions, *OCTOBER)

        assert totals.expenses == Decimal("6")

    def test_malformed_records_are_excluded(self):
        """Test that bad dates and amounts are skipped without raising."""
        transactions = [
            expense(1, "10", datetime(2026, 10, 2)),
            expense(2, "20", "not a date"),
            expense(3, "abc", datetime(2026, 10, 2)),
            expense(4, "-5", datetime(2026, 10, 2)),
            expense(5, "0", datetime(2026, 10, 2)),
            expense(6, None, datetime(2026, 10, 2)),
            expense(7, "30", None),
        ]

        totals = compute_period_totals(transactions, *OCTOBER)

        assert totals.expenses == Decimal("10")
        assert totals.net == Decimal("-10")

    def test_out_of_range_values_are_excluded(self):
        """Test that extreme dates and amounts are skipped instead of overflowing."""
        transactions = [
            expense(1, "10", datetime(2026, 10, 2)),
            expense(2, "20", "0001-01-01T00:00:00+01:00"),
            expense(3, "1E+1000000", datetime(2026, 10, 2)),
            expense(4, "1E+1000000", datetime(2026, 10, 3)),
        ]

        totals = compute_period_totals(transactions, *OCTOBER)

        assert totals.expenses == Decimal("10")

    def test_accepts_string_and_date_values(self):
        """Test that ISO strings, dates and floats are read."""
        transactions = [
            expense(1, 12.5, "2026-10-04T10:00:00"),
            expense(2, "7.50", date(2026, 10, 5)),
        ]

        totals = compute_period_totals(transactions, date(2026, 10, 1), "2026-11-01")

        assert totals.expenses == Decimal("20.00")

    def test_timezone_aware_dates_compare_in_utc(self):
        """Test that aware timestamps are converted to UTC before filtering."""
        plus_two = timezone(timedelta(hours=2))
        transactions = [
            # 2026-11-01 01:00 at UTC+2 is still October in UTC
            expense(1, "5", datetime(2026, 11, 1, 1, 0, tzinfo=plus_two)),
        ]

        totals = compute_period_totals(transactions, *OCTOBER)

        assert totals.expenses == Decimal("5")

    def test_empty_transactions(self):
        """Test that no transactions give zero totals."""
        totals = compute_period_totals([], *OCTOBER)

        assert totals == PeriodTotals(Decimal("0"), Decimal("0"), Decimal("0"))

    def test_none_transactions_raises(self):
        """Test that a missing collection is a programming error."""
        with pytest.raises(TypeError):
            compute_period_totals(None, *OCTOBER)


class TestComputeCategoryBreakdown:
    """Tests for compute_category_breakdown."""

    def test_groups_and_colors_by_category(self):
        """Test summing two expenses of one category."""
        transactions = [
            expense(1, "50", datetime(2026, 10, 2), category="Food"),
            expense(2, "30", datetime(2026, 10, 2), category="Food"),
        ]
        categories = [make_category(name="Food", color="#111")]

        breakdown = compute_category_breakdown(transactions, categories, *OCTOBER)

        assert breakdown == [CategorySpend(category="Food", amount=Decimal("80"), color="#111")]

    def test_sorted_largest_first(self):
        """Test that entries are ordered by amount, descending."""
        transactions = [
            expense(1, "20", datetime(2026, 10, 2), category="Dining"),
            expense(2, "1650", datetime(2026, 10, 1), category="Rent"),
            expense(3, "132.48", datetime(2026, 10, 3), category="Groceries"),
            expense(4, "118.67", datetime(2026, 10, 10), category="Groceries"),
        ]

        breakdown = compute_category_breakdown(transactions, [], *OCTOBER)

        assert [entry.category for entry in breakdown] == ["Rent", "Groceries", "Dining"]
        amounts = [entry.amount for entry in breakdown]
        assert amounts == sorted(amounts, reverse=True)

    def test_ties_keep_first_seen_order(self):
        """Test that equal amounts keep the order categories first appeared."""
        transactions = [
            expense(1, "10", datetime(2026, 10, 2), category="Utilities"),
            expense(2, "25", datetime(2026, 10, 2), category="Dining"),
            expense(3, "10", datetime(2026, 10, 2), category="Books"),
            expense(4, "15", datetime(2026, 10, 2), category="Utilities"),
        ]

        breakdown = compute_category_breakdown(transactions, [], *OCTOBER)

        assert [entry.category for entry in breakdown] == ["Utilities", "Dining", "Books"]

    def test_total_matches_filtered_expenses(self):
        """Test that every in-period expense is counted exactly once."""
        transactions = [
            expense(1, "12.34", datetime(2026, 10, 2), category="A"),
            expense(2, "56.78", datetime(2026, 10, 3), category="B"),
            expense(3, "9.10", datetime(2026, 10, 4), category="A"),
            expense(4, "100", datetime(2026, 9, 4), category="A"),
            income(5, "999", datetime(2026, 10, 4)),
        ]

        breakdown = compute_category_breakdown(transactions, [], *OCTOBER)
        totals = compute_period_totals(transactions, *OCTOBER)

        assert sum(entry.amount for entry in breakdown) == totals.expenses

    def test_unknown_category_uses_fallback_color(self):
        """Test that orphaned category names still get an entry."""
        transactions = [expense(1, "5", datetime(2026, 10, 2), category="Mystery")]

        breakdown = compute_category_breakdown(
            transactions, [make_category(name="Groceries")], *OCTOBER
        )

        assert breakdown[0].color == FALLBACK_COLOR == "#6B7280"

    def test_income_category_with_same_name_not_used(self):
        """Test that color lookup matches the expense category only."""
        categories = [
            make_category(id=1, name="Gifts", type=CategoryType.INCOME, color="#00FF00"),
            make_category(id=2, name="Gifts", type=CategoryType.EXPENSE, color="#FF0000"),
        ]
        transactions = [expense(1, "40", datetime(2026, 10, 2), category="Gifts")]

        breakdown = compute_category_breakdown(transactions, categories, *OCTOBER)

        assert breakdown[0].color == "#FF0000"

    def test_missing_category_name_grouped_as_uncategorized(self):
        """Test that expenses without a category are still counted."""
        transactions = [
            expense(1, "3", datetime(2026, 10, 2), category=None),
            expense(2, "4", datetime(2026, 10, 2), category=""),
        ]

        breakdown = compute_category_breakdown(transactions, [], *OCTOBER)

        assert breakdown == [
            CategorySpend(category=UNCATEGORIZED, amount=Decimal("7"), color=FALLBACK_COLOR)
        ]

    def test_empty_inputs(self):
        """Test that no transactions give an empty breakdown."""
        assert compute_category_breakdown([], [], *OCTOBER) == []


class TestComputeTrendSeries:
    """Tests for compute_trend_series."""

    def test_always_returns_requested_bucket_count(self):
        """Test six zero buckets for no transactions."""
        trend = compute_trend_series([], 6, now=NOW)

        assert len(trend) == 6
        assert [point.label for point in trend] == ["May", "Jun", "Jul", "Aug", "Sep", "Oct"]
        assert all(point.income == 0 and point.expenses == 0 for point in trend)

    def test_buckets_are_consecutive_months_ending_now(self):
        """Test the start of every monthly bucket."""
        trend = compute_trend_series([], 3, now=NOW)

        assert [point.start for point in trend] == [
            datetime(2026, 8, 1),
            datetime(2026, 9, 1),
            datetime(2026, 10, 1),
        ]

    def test_sums_per_month(self):
        """Test that each transaction lands in its calendar month."""
        transactions = [
            income(1, "5200", datetime(2026, 10, 1, 9)),
            expense(2, "1650", datetime(2026, 10, 1, 10)),
            income(3, "5200", datetime(2026, 9, 1, 9)),
            expense(4, "412.90", datetime(2026, 9, 13)),
            expense(5, "99", datetime(2026, 3, 1)),  # before the window
            expense(6, "99", datetime(2026, 11, 1)),  # after the window
        ]

        trend = compute_trend_series(transactions, 6, now=NOW)

        september, october = trend[-2], trend[-1]
        assert (september.income, september.expenses) == (Decimal("5200"), Decimal("412.90"))
        assert (october.income, october.expenses) == (Decimal("5200"), Decimal("1650"))
        assert all(point.expenses == 0 for point in trend[:-2])

    def test_crosses_year_boundary(self):
        """Test that buckets run back into the previous year."""
        transactions = [expense(1, "10", datetime(2025, 12, 24))]

        trend = compute_trend_series(transactions, 3, now=datetime(2026, 2, 10))

        assert [point.start for point in trend] == [
            datetime(2025, 12, 1),
            datetime(2026, 1, 1),
            datetime(2026, 2, 1),
        ]
        assert trend[0].expenses == Decimal("10")

    def test_weekly_buckets_start_on_monday(self):
        """Test week buckets and their labels."""
        transactions = [
            expense(1, "5", datetime(2026, 10, 18, 23)),  # Sunday
            expense(2, "7", datetime(2026, 10, 19, 8)),  # Monday
        ]

        trend = compute_trend_series(transactions, 2, "week", now=NOW)

        assert [point.label for point in trend] == ["Oct 12", "Oct 19"]
        assert [point.expenses for point in trend] == [Decimal("5"), Decimal("7")]

    def test_yearly_buckets(self):
        """Test year buckets and their labels."""
        transactions = [income(1, "100", datetime(2025, 6, 1)), income(2, "50", datetime(2026, 1, 2))]

        trend = compute_trend_series(transactions, 2, "year", now=NOW)

        assert [point.label for point in trend] == ["2025", "2026"]
        assert [point.income for point in trend] == [Decimal("100"), Decimal("50")]

    def test_malformed_records_are_skipped(self):
        """Test that bad records do not stop the series."""
        transactions = [
            expense(1, "5", "garbage"),
            expense(2, "x", datetime(2026, 10, 2)),
            expense(3, "2", datetime(2026, 10, 2)),
        ]

        trend = compute_trend_series(transactions, 1, now=NOW)

        assert trend[0].expenses == Decimal("2")

    def test_same_inputs_give_identical_output(self):
        """Test that repeated calls with the same reference time agree."""
        transactions = [expense(i, str(i), datetime(2026, 10 - i % 5, 3)) for i in range(1, 20)]

        assert compute_trend_series(transactions, 6, now=NOW) == compute_trend_series(
            transactions, 6, now=NOW
        )

    def test_non_positive_bucket_count(self):
        """Test that zero buckets give an empty series."""
        assert compute_trend_series([expense(1, "5", NOW)], 0, now=NOW) == []

    def test_unknown_bucket_unit_raises(self):
        """Test that only the supported units are accepted."""
        with pytest.raises(ValueError, match="Unsupported bucket unit"):
            compute_trend_series([], 6, "fortnight", now=NOW)
