"""Tests for per-account variance between two entry sets."""

from datetime import date
from decimal import Decimal

from src.domain.models.ledger import LedgerEntry
from src.domain.models.pnl import VarianceRow
from src.domain.services.comparison import compute_variance


def _entry(account, account_type, amount):
    return LedgerEntry(
        date=date(2025, 6, 1),
        account=account,
        account_type=account_type,
        amount=Decimal(amount),
    )


def test_variance_rows_sorted_by_absolute_change() -> None:
    """Rows should be ordered by the size of the change."""
    left = [
        _entry("Rent Income", "Income", "5000"),
        _entry("Cleaning", "Expense", "200"),
        _entry("Mortgage", "Loan", "1500"),
    ]
    right = [
        _entry("Rent Income", "Income", "4000"),
        _entry("Cleaning", "Expense", "500"),
        _entry("Repairs", "Expense", "50"),
    ]

    rows = compute_variance(left, right)

    assert [row.account for row in rows] == [
        "Rent Income",
        "Cleaning",
        "Repairs",
    ]
    rent, cleaning, repairs = rows
    assert rent.variance == Decimal("1000")
    assert rent.variance_pct == Decimal("0.25")
    assert cleaning.variance == Decimal("-300")
    assert cleaning.variance_pct == Decimal("-0.6")
    assert repairs.a == 0
    assert repairs.variance_pct == Decimal("-1")


def test_variance_pct_is_none_when_baseline_is_zero() -> None:
    """No percentage should be given against a zero baseline."""
    row = VarianceRow(account="New Fees", a=Decimal("10"), b=Decimal("0"))

    assert row.variance == Decimal("10")
    assert row.variance_pct is None


def test_variance_pct_uses_absolute_baseline() -> None:
    """Negative baselines should not flip the percentage sign."""
    row = VarianceRow(account="Refunds", a=Decimal("-50"), b=Decimal("-100"))

    assert row.variance_pct == Decimal("0.5")
