"""CLI adapter printing the P&L report for a month and period.

The report is configured through environment variables so it can run
from cron or a shell without arguments:

- ``REPORT_MONTH``: ``June 2025`` or ``2025-06`` (default: current month)
- ``REPORT_PERIOD``: Monthly, Quarterly, Yearly or Trailing 12
- ``REPORT_BREAKDOWN``: total or detailed
- ``REPORT_PROPERTY``: property label (default: All Properties)
- ``REPORT_BY_PROPERTY``: ``1`` to break accounts out per property
"""

from datetime import date
import os

from src.application.use_cases.get_profit_and_loss import ProfitAndLossReport
from src.domain.constants import ALL_PROPERTIES
from src.domain.models.ledger import Breakdown, PeriodKind, PLCategory
from src.domain.services.kpis import category_total
from src.domain.services.periods import parse_reference_month, recent_months
from src.infrastructure.container import build_profit_and_loss_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_enum(enum_cls, raw: str | None, default, logger):
    """Parse an enum value case-insensitively, falling back to a default.

    Args:
        enum_cls: Enum class to parse into.
        raw: Raw value, matched against member values.
        default: Member returned when the value is empty or unknown.
        logger: Logger used for warnings.

    Returns:
        Enum member.
    """
    if not raw:
        return default
    for member in enum_cls:
        if member.value.lower() == raw.strip().lower():
            return member
    logger.warning(f"Unknown {enum_cls.__name__} '{raw}', using {default.value}")
    return default


def _format_amount(value) -> str:
    return f"{value:,.2f}"


def _print_report(report: ProfitAndLossReport) -> None:
    kpis = report.kpis
    print(f"Periods: {', '.join(report.periods)}")
    print(f"Revenue: {_format_amount(kpis.revenue)}")
    print(f"COGS: {_format_amount(kpis.cogs)}")
    print(
        f"Gross profit: {_format_amount(kpis.gross_profit)} "
        f"({kpis.gross_margin:.1f}%)"
    )
    print(f"Operating expenses: {_format_amount(kpis.operating_expenses)}")
    print(
        f"Net operating income: {_format_amount(kpis.net_operating_income)} "
        f"({kpis.operating_margin:.1f}%)"
    )
    print(f"Other income: {_format_amount(kpis.other_income)}")
    print(f"Other expenses: {_format_amount(kpis.other_expenses)}")
    print(
        f"Net income: {_format_amount(kpis.net_income)} "
        f"({kpis.net_margin:.1f}%)"
    )
    for group in report.groups:
        print(
            f"  [{group.category.value}] {group.name}: "
            f"{_format_amount(group.total)}"
        )
        for sub in group.sub_accounts:
            print(f"      {sub.name}: {_format_amount(sub.total)}")
    for prop in report.properties:
        revenue = category_total(report.accounts, PLCategory.REVENUE, prop)
        print(f"Revenue [{prop}]: {_format_amount(revenue)}")
    for item in report.expenses[:5]:
        print(f"Top expense {item.name}: {_format_amount(item.amount)}")


def main() -> None:
    """Fetch, aggregate and print the P&L report."""
    logger = get_app_logger()
    raw_month = os.getenv("REPORT_MONTH")
    try:
        reference_month = (
            parse_reference_month(raw_month) if raw_month else date.today()
        )
    except ValueError as exc:
        examples = ", ".join(recent_months(date.today(), count=3))
        logger.error(f"{exc} Recent months: {examples}")
        return
    period_kind = _parse_enum(
        PeriodKind, os.getenv("REPORT_PERIOD"), PeriodKind.TRAILING_12, logger
    )
    breakdown = _parse_enum(
        Breakdown, os.getenv("REPORT_BREAKDOWN"), Breakdown.TOTAL, logger
    )
    property_name = os.getenv("REPORT_PROPERTY") or ALL_PROPERTIES
    group_by_property = os.getenv("REPORT_BY_PROPERTY", "").strip() == "1"

    get_usage_logger().info(
        f"P&L report requested: month={reference_month:%Y-%m}, "
        f"period={period_kind.value}, breakdown={breakdown.value}, "
        f"property={property_name}, by_property={group_by_property}"
    )
    use_case = build_profit_and_loss_use_case()
    result = use_case.execute(
        reference_month,
        period_kind=period_kind,
        breakdown=breakdown,
        property_name=property_name,
        group_by_property=group_by_property,
    )
    if not result.success:
        print(f"Report failed: {result.error}")
        return
    _print_report(result.report)


if __name__ == "__main__":  # pragma: no cover
    main()
