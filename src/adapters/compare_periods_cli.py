"""CLI adapter comparing two ledger slices.

Set ``COMPARE_A_START``/``COMPARE_A_END`` and ``COMPARE_B_START``/
``COMPARE_B_END`` (YYYY-MM-DD) to compare periods, and optionally
``COMPARE_A_PROPERTY``/``COMPARE_B_PROPERTY`` to compare properties.
"""

from datetime import date
import os

from src.application.ports.ledger_repository import LedgerSourceError
from src.application.use_cases.compare_periods import ComparisonSide
from src.domain.constants import ALL_PROPERTIES
from src.infrastructure.container import build_compare_periods_use_case
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _read_side(prefix: str, logger) -> ComparisonSide | None:
    start = _parse_date(os.getenv(f"{prefix}_START"), logger)
    end = _parse_date(os.getenv(f"{prefix}_END"), logger)
    if start is None or end is None:
        return None
    return ComparisonSide(
        start_date=start,
        end_date=end,
        property_name=os.getenv(f"{prefix}_PROPERTY") or ALL_PROPERTIES,
    )


def main() -> None:
    """Print KPIs of both sides and the largest account variances."""
    logger = get_app_logger()
    left = _read_side("COMPARE_A", logger)
    right = _read_side("COMPARE_B", logger)
    if left is None or right is None:
        logger.warning(
            "COMPARE_A_START/END and COMPARE_B_START/END are required."
        )
        return

    use_case = build_compare_periods_use_case()
    try:
        view = use_case.execute(left, right)
    except LedgerSourceError as exc:
        logger.error(str(exc))
        return

    print(f"A = {left.label}")
    print(f"B = {right.label}")
    print(
        f"Revenue: A={view.left.revenue:,.2f} B={view.right.revenue:,.2f}"
    )
    print(
        f"Net income: A={view.left.net_income:,.2f} "
        f"B={view.right.net_income:,.2f}"
    )
    for row in view.variance[:20]:
        pct = (
            f"{row.variance_pct * 100:.1f}%"
            if row.variance_pct is not None
            else "n/a"
        )
        print(
            f"  {row.account}: A={row.a:,.2f} B={row.b:,.2f} "
            f"var={row.variance:,.2f} ({pct})"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
