"""Tests for P&L KPI computation."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from src.domain.models.ledger import LedgerEntry, PeriodRange, PLCategory
from src.domain.models.pnl import AccountAggregate, PeriodBucket
from src.domain.services.kpis import (
    category_total,
    compute_kpis,
    compute_property_breakdown,
    compute_trend,
    expense_breakdown,
    margin,
)


def _account(category, total, name="acct"):
    return SimpleNamespace(name=name, category=category, total=Decimal(total))


def _aggregate(name, category, amounts_by_property):
    aggregate = AccountAggregate(name=name, category=category)
    for prop, amount in amounts_by_property.items():
        entry = LedgerEntry(
            date=date(2025, 6, 1),
            account=name,
            property_name=prop,
            amount=Decimal(amount),
        )
        aggregate.add(entry, by_property=True)
    return aggregate


def test_kpi_identities_hold() -> None:
    """KPIs should follow the P&L identities."""
    kpis = compute_kpis(
        [
            _account(PLCategory.REVENUE, "10000"),
            _account(PLCategory.COGS, "2000"),
            _account(PLCategory.OPERATING_EXPENSES, "3000"),
            _account(PLCategory.OTHER_INCOME, "500"),
            _account(PLCategory.OTHER_EXPENSES, "1500"),
        ]
    )

    assert kpis.gross_profit == kpis.revenue - kpis.cogs == Decimal("8000")
    assert kpis.net_operating_income == Decimal("5000")
    assert kpis.net_income == (
        kpis.net_operating_income + kpis.other_income - kpis.other_expenses
    )
    assert kpis.net_income == Decimal("4000")
    assert kpis.gross_margin == Decimal("80")
    assert kpis.operating_margin == Decimal("50")
    assert kpis.net_margin == Decimal("40")


def test_margins_are_zero_without_revenue() -> None:
    """Margins should be zero when there is no revenue."""
    kpis = compute_kpis(
        [
            _account(PLCategory.OPERATING_EXPENSES, "300"),
            _account(PLCategory.OTHER_INCOME, "900"),
        ]
    )

    assert kpis.revenue == 0
    assert kpis.gross_margin == 0
    assert kpis.operating_margin == 0
    assert kpis.net_margin == 0
    assert kpis.net_income == Decimal("600")


def test_empty_input_gives_zero_kpis() -> None:
    """No accounts should give zero KPIs."""
    kpis = compute_kpis([])

    assert kpis.revenue == kpis.net_income == kpis.gross_margin == 0


def test_margin_helper() -> None:
    """margin should guard against zero revenue."""
    assert margin(Decimal("25"), Decimal("100")) == Decimal("25")
    assert margin(Decimal("25"), Decimal("0")) == 0


def test_category_total_overall_and_per_property() -> None:
    """category_total should sum a category, optionally per property."""
    accounts = [
        _aggregate("Rent", PLCategory.REVENUE, {"Maple": "100", "Oak": "50"}),
        _aggregate("Fees", PLCategory.REVENUE, {"Oak": "5"}),
        _aggregate("Cleaning", PLCategory.OPERATING_EXPENSES, {"Oak": "7"}),
    ]

    assert category_total(accounts, PLCategory.REVENUE) == Decimal("155")
    assert category_total(accounts, PLCategory.REVENUE, "Oak") == Decimal("55")
    assert category_total(accounts, PLCategory.REVENUE, "Elm") == 0


def test_trend_skips_inactive_periods() -> None:
    """Periods without revenue or net income should be skipped."""
    active = PeriodBucket(
        period=PeriodRange(date(2025, 5, 1), date(2025, 5, 31), "May 2025"),
        accounts={
            "Rent": _aggregate("Rent", PLCategory.REVENUE, {"Maple": "400"}),
        },
    )
    empty = PeriodBucket(
        period=PeriodRange(date(2025, 6, 1), date(2025, 6, 30), "Jun 2025"),
    )
    loss = PeriodBucket(
        period=PeriodRange(date(2025, 7, 1), date(2025, 7, 31), "Jul 2025"),
        accounts={
            "Repairs": _aggregate(
                "Repairs", PLCategory.OPERATING_EXPENSES, {"Maple": "90"}
            ),
        },
    )

    points = compute_trend([active, empty, loss])

    assert [point.label for point in points] == ["May 2025", "Jul 2025"]
    assert points[0].revenue == Decimal("400")
    assert points[1].net_income == Decimal("-90")


def test_property_breakdown_reports_active_properties() -> None:
    """Only properties with activity should be reported."""
    accounts = [
        _aggregate("Rent", PLCategory.REVENUE, {"Maple": "100", "Oak": "0"}),
        _aggregate("Cleaning", PLCategory.OPERATING_EXPENSES, {"Maple": "30"}),
    ]

    points = compute_property_breakdown(accounts, ["Maple", "Oak"])

    assert [point.label for point in points] == ["Maple"]
    assert points[0].operating_income == Decimal("70")


def test_expense_breakdown_orders_by_size() -> None:
    """Expense slices should skip idle accounts and sort by size."""
    accounts = [
        _account(PLCategory.OPERATING_EXPENSES, "30", "Cleaning"),
        _account(PLCategory.OPERATING_EXPENSES, "0", "Idle"),
        _account(PLCategory.OPERATING_EXPENSES, "-80", "Refunds"),
        _account(PLCategory.REVENUE, "900", "Rent"),
    ]

    slices = expense_breakdown(accounts)

    assert [item.name for item in slices] == ["Refunds", "Cleaning"]
