"""Tests for the GetProfitAndLossUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.ledger_repository import LedgerSourceError
from src.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
)
from src.domain.constants import ALL_PROPERTIES, NO_PROPERTY
from src.domain.models.ledger import Breakdown, LedgerEntry, PeriodKind
from src.infrastructure.validation_cache import ValidationCache


class _FakeRepository:
    def __init__(self, entries: list[LedgerEntry]) -> None:
        self._entries = entries
        self.calls: list[tuple] = []

    def fetch_entries(
        self,
        start_date,
        end_date,
        property_name=None,
        limit=None,
    ) -> list[LedgerEntry]:
        self.calls.append((start_date, end_date, property_name, limit))
        rows = [
            entry
            for entry in self._entries
            if entry.date is not None
            and start_date <= entry.date <= end_date
            and (property_name is None or entry.property_name == property_name)
        ]
        return rows[:limit] if limit else rows

    def fetch_properties(self) -> list[str]:
        return sorted({entry.property_name for entry in self._entries})


def _entry(day, account, account_type, amount, prop=NO_PROPERTY, entry_id=None):
    return LedgerEntry(
        date=day,
        account=account,
        account_type=account_type,
        property_name=prop,
        amount=Decimal(str(amount)),
        entry_id=entry_id,
    )


def _ledger() -> list[LedgerEntry]:
    return [
        _entry(date(2025, 5, 3), "Rent Income", "Income", 4000, "Maple", "1"),
        _entry(date(2025, 6, 5), "Rent Income", "Income", 4500, "Maple", "2"),
        _entry(date(2025, 6, 9), "Rent Income", "Income", 1500, "Oak", "3"),
        _entry(date(2025, 6, 10), "Cleaning", "Expense", 300, "Oak", "4"),
        _entry(date(2025, 6, 12), "Utilities:Water", "Expense", 100, "Oak", "5"),
        _entry(date(2025, 6, 13), "Utilities:Gas", "Expense", 50, "Maple", "6"),
        _entry(date(2025, 6, 20), "Vendor Bills", "Accounts Payable", 900),
    ]


def test_monthly_total_report() -> None:
    """A monthly report should hold one bucket with P&L accounts only."""
    repository = _FakeRepository(_ledger())
    use_case = GetProfitAndLossUseCase(repository, logger=MagicMock())

    result = use_case.execute(
        date(2025, 6, 1),
        period_kind=PeriodKind.MONTHLY,
        breakdown=Breakdown.TOTAL,
    )

    assert result.success
    report = result.report
    assert report.periods == ["June 2025"]
    assert report.kpis.revenue == Decimal("6000")
    assert report.kpis.operating_expenses == Decimal("450")
    assert report.kpis.net_operating_income == Decimal("5550")
    assert {account.name for account in report.accounts} == {
        "Rent Income",
        "Cleaning",
        "Utilities:Water",
        "Utilities:Gas",
    }
    utilities = next(g for g in report.groups if g.name == "Utilities")
    assert utilities.total == Decimal("150")
    assert report.summary.entries_fetched == 6
    assert [item.name for item in report.expenses] == [
        "Cleaning",
        "Utilities:Water",
        "Utilities:Gas",
    ]
    assert report.summary.periods_generated == 1
    assert report.properties == []
    assert repository.calls == [
        (date(2025, 6, 1), date(2025, 6, 30), None, 10000),
    ]


def test_property_filter_is_passed_to_repository() -> None:
    """A selected property should narrow the fetch."""
    repository = _FakeRepository(_ledger())
    use_case = GetProfitAndLossUseCase(repository, logger=MagicMock())

    result = use_case.execute(
        date(2025, 6, 1),
        period_kind=PeriodKind.MONTHLY,
        property_name="Oak",
    )

    assert result.report.kpis.revenue == Decimal("1500")
    assert repository.calls[0][2] == "Oak"


def test_trailing_total_collapses_into_one_bucket() -> None:
    """Trailing twelve months in total should be a single bucket."""
    repository = _FakeRepository(_ledger())
    use_case = GetProfitAndLossUseCase(repository, logger=MagicMock())

    result = use_case.execute(date(2025, 6, 1))

    report = result.report
    assert report.periods == ["Trailing 12 Months"]
    assert len(repository.calls) == 12
    assert report.summary.periods_generated == 12
    assert report.kpis.revenue == Decimal("10000")
    assert [point.label for point in report.trend] == ["Trailing 12 Months"]


def test_trailing_detailed_keeps_monthly_trend() -> None:
    """Detailed trailing view should keep one bucket per month."""
    use_case = GetProfitAndLossUseCase(
        _FakeRepository(_ledger()),
        logger=MagicMock(),
    )

    result = use_case.execute(
        date(2025, 6, 1),
        period_kind=PeriodKind.TRAILING_12,
        breakdown=Breakdown.DETAILED,
    )

    report = result.report
    assert len(report.buckets) == 12
    assert report.periods[0] == "Jul 2024"
    assert [point.label for point in report.trend] == ["May 2025", "Jun 2025"]


def test_group_by_property_ignores_filter_and_breaks_out_trend() -> None:
    """Grouping by property should fetch everything and report per property."""
    repository = _FakeRepository(_ledger())
    use_case = GetProfitAndLossUseCase(repository, logger=MagicMock())

    result = use_case.execute(
        date(2025, 6, 1),
        period_kind=PeriodKind.MONTHLY,
        property_name="Oak",
        group_by_property=True,
    )

    report = result.report
    assert repository.calls[0][2] is None
    assert report.properties == ["Maple", "Oak"]
    assert [point.label for point in report.trend] == ["Maple", "Oak"]
    maple, oak = report.trend
    assert maple.net_income == Decimal("4450")
    assert oak.net_income == Decimal("1100")
    rent = next(a for a in report.accounts if a.name == "Rent Income")
    assert rent.property_totals == {
        "Maple": Decimal("4500"),
        "Oak": Decimal("1500"),
    }
    assert report.summary.property_name == "Oak"


def test_source_failure_returns_failed_result() -> None:
    """Repository errors should become a failed result."""
    repository = MagicMock()
    repository.fetch_entries.side_effect = LedgerSourceError("timeout")
    logger = MagicMock()
    use_case = GetProfitAndLossUseCase(repository, logger=logger)

    result = use_case.execute(date(2025, 6, 1), PeriodKind.MONTHLY)

    assert result.success is False
    assert result.report is None
    assert result.error == "timeout"
    logger.error.assert_called_once()


def test_row_limit_warning() -> None:
    """Hitting the row limit should be logged as a warning."""
    logger = MagicMock()
    use_case = GetProfitAndLossUseCase(
        _FakeRepository(_ledger()),
        logger=logger,
        row_limit=2,
    )

    result = use_case.execute(date(2025, 6, 1), PeriodKind.MONTHLY)

    assert result.success
    assert result.report.summary.entries_fetched == 2
    messages = [call.args[0] for call in logger.warning.call_args_list]
    assert any("row limit" in message for message in messages)


def test_validation_reports_are_cached() -> None:
    """Identical batches should be validated once per cache lifetime."""
    cache = ValidationCache(ttl_seconds=60, clock=lambda: 0.0)
    use_case = GetProfitAndLossUseCase(
        _FakeRepository(_ledger()),
        logger=MagicMock(),
        validation_cache=cache,
    )

    first = use_case.execute(date(2025, 6, 1), PeriodKind.MONTHLY)
    second = use_case.execute(date(2025, 6, 1), PeriodKind.MONTHLY)

    assert first.report.validations[0] is second.report.validations[0]
    assert cache.metrics.hits == 1
    assert cache.metrics.misses == 1


def test_default_property_is_all_properties() -> None:
    """Summary should record the default property selection."""
    use_case = GetProfitAndLossUseCase(
        _FakeRepository([]),
        logger=MagicMock(),
    )

    result = use_case.execute(date(2025, 6, 1), PeriodKind.YEARLY)

    assert result.success
    assert result.report.summary.property_name == ALL_PROPERTIES
    assert result.report.trend == []
    assert result.report.kpis.net_margin == 0
