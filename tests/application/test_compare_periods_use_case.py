"""Tests for the ComparePeriodsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.ledger_repository import LedgerSourceError
from src.application.use_cases.compare_periods import (
    ComparePeriodsUseCase,
    ComparisonSide,
)
from src.domain.models.ledger import LedgerEntry


def _entry(day, account, account_type, amount):
    return LedgerEntry(
        date=day,
        account=account,
        account_type=account_type,
        amount=Decimal(amount),
    )


def test_execute_compares_two_periods() -> None:
    """Both sides should get KPIs and a shared variance table."""
    may = [
        _entry(date(2025, 5, 2), "Rent Income", "Income", "4000"),
        _entry(date(2025, 5, 9), "Cleaning", "Expense", "250"),
    ]
    june = [
        _entry(date(2025, 6, 2), "Rent Income", "Income", "4500"),
        _entry(date(2025, 6, 9), "Cleaning", "Expense", "300"),
        _entry(
            date(2025, 6, 10),
            "Security Deposits",
            "Other Current Liabilities",
            "900",
        ),
    ]
    repository = MagicMock()
    repository.fetch_entries.side_effect = [june, may]

    use_case = ComparePeriodsUseCase(repository, logger=MagicMock())
    left = ComparisonSide(date(2025, 6, 1), date(2025, 6, 30))
    right = ComparisonSide(date(2025, 5, 1), date(2025, 5, 31), "Maple")

    view = use_case.execute(left, right)

    assert view.left.revenue == Decimal("4500")
    assert view.left.net_operating_income == Decimal("4200")
    assert view.right.net_operating_income == Decimal("3750")
    assert [row.account for row in view.variance] == [
        "Rent Income",
        "Cleaning",
    ]
    assert view.variance[0].variance == Decimal("500")
    repository.fetch_entries.assert_any_call(
        date(2025, 6, 1),
        date(2025, 6, 30),
        property_name=None,
    )
    repository.fetch_entries.assert_any_call(
        date(2025, 5, 1),
        date(2025, 5, 31),
        property_name="Maple",
    )


def test_side_labels() -> None:
    """Labels should show the range and the property when set."""
    side = ComparisonSide(date(2025, 6, 1), date(2025, 6, 30))

    assert side.label == "2025-06-01..2025-06-30"
    assert (
        ComparisonSide(date(2025, 6, 1), date(2025, 6, 30), "Oak").label
        == "2025-06-01..2025-06-30 (Oak)"
    )


def test_execute_propagates_source_errors() -> None:
    """Source errors should reach the caller."""
    repository = MagicMock()
    repository.fetch_entries.side_effect = LedgerSourceError("boom")
    side = ComparisonSide(date(2025, 6, 1), date(2025, 6, 30))

    with pytest.raises(LedgerSourceError):
        ComparePeriodsUseCase(repository, logger=MagicMock()).execute(
            side, side
        )
