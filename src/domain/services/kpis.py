"""Domain services for P&L summary figures."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.models.ledger import PLCategory
from src.domain.models.pnl import (
    AccountAggregate,
    ExpenseSlice,
    PeriodBucket,
    ProfitAndLossKpis,
    TrendPoint,
)

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def compute_kpis(accounts: Iterable) -> ProfitAndLossKpis:
    """Compute the P&L roll-up of a set of accounts.

    Args:
        accounts: Objects exposing ``category`` and ``total`` (account
            aggregates or grouped accounts).

    Returns:
        ProfitAndLossKpis: Totals, profits and margins. Margins are zero
        when revenue is zero.
    """
    totals = _totals_by_category(
        (account.category, account.total) for account in accounts
    )
    return _build_kpis(totals)


def category_total(
    accounts: Iterable[AccountAggregate],
    category: PLCategory,
    property_name: str | None = None,
) -> Decimal:
    """Sum account totals of one category.

    Args:
        accounts: Account aggregates of a view.
        category: Category to sum.
        property_name: Restrict to one property's sub-totals when set.

    Returns:
        Decimal: Category total.
    """
    total = _ZERO
    for account in accounts:
        if account.category is not category:
            continue
        if property_name is None:
            total += account.total
        else:
            total += _property_total(account, property_name)
    return total


def compute_trend(buckets: Sequence[PeriodBucket]) -> list[TrendPoint]:
    """Return headline figures per period, skipping inactive periods."""
    points = []
    for bucket in buckets:
        kpis = compute_kpis(bucket.accounts.values())
        point = _trend_point(bucket.label, kpis)
        if _is_active(point):
            points.append(point)
    return points


def compute_property_breakdown(
    accounts: Sequence[AccountAggregate],
    properties: Sequence[str],
) -> list[TrendPoint]:
    """Return headline figures per property, skipping inactive properties.

    Args:
        accounts: Aggregates built with the property dimension.
        properties: Property labels to report, in display order.

    Returns:
        list[TrendPoint]: One point per active property.
    """
    points = []
    for prop in properties:
        totals = _totals_by_category(
            (account.category, _property_total(account, prop))
            for account in accounts
        )
        point = _trend_point(prop, _build_kpis(totals))
        if _is_active(point):
            points.append(point)
    return points


def expense_breakdown(
    accounts: Iterable[AccountAggregate],
) -> list[ExpenseSlice]:
    """Return operating expense accounts with activity, largest first."""
    slices = [
        ExpenseSlice(name=account.name, amount=account.total)
        for account in accounts
        if account.category is PLCategory.OPERATING_EXPENSES
        and account.total != 0
    ]
    return sorted(slices, key=lambda item: (-abs(item.amount), item.name))


def margin(value: Decimal, revenue: Decimal) -> Decimal:
    """Return ``value / revenue * 100``, or zero when revenue is zero."""
    if revenue == 0:
        return _ZERO
    return value / revenue * _HUNDRED


def _totals_by_category(pairs) -> dict[PLCategory, Decimal]:
    totals = {category: _ZERO for category in PLCategory}
    for category, amount in pairs:
        totals[category] += amount
    return totals


def _build_kpis(totals: dict[PLCategory, Decimal]) -> ProfitAndLossKpis:
    revenue = totals[PLCategory.REVENUE]
    cogs = totals[PLCategory.COGS]
    operating_expenses = totals[PLCategory.OPERATING_EXPENSES]
    other_income = totals[PLCategory.OTHER_INCOME]
    other_expenses = totals[PLCategory.OTHER_EXPENSES]

    gross_profit = revenue - cogs
    net_operating_income = gross_profit - operating_expenses
    net_income = net_operating_income + other_income - other_expenses
    return ProfitAndLossKpis(
        revenue=revenue,
        cogs=cogs,
        gross_profit=gross_profit,
        operating_expenses=operating_expenses,
        net_operating_income=net_operating_income,
        other_income=other_income,
        other_expenses=other_expenses,
        net_income=net_income,
        gross_margin=margin(gross_profit, revenue),
        operating_margin=margin(net_operating_income, revenue),
        net_margin=margin(net_income, revenue),
    )


def _trend_point(label: str, kpis: ProfitAndLossKpis) -> TrendPoint:
    return TrendPoint(
        label=label,
        revenue=kpis.revenue,
        gross_profit=kpis.gross_profit,
        operating_income=kpis.net_operating_income,
        net_income=kpis.net_income,
    )


def _is_active(point: TrendPoint) -> bool:
    return point.revenue > 0 or point.net_income != 0


def _property_total(account: AccountAggregate, property_name: str) -> Decimal:
    totals = account.property_totals or {}
    return totals.get(property_name, _ZERO)


__all__ = [
    "compute_kpis",
    "category_total",
    "compute_trend",
    "compute_property_breakdown",
    "expense_breakdown",
    "margin",
]
