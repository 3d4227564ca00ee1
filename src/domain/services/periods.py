"""Reporting period range generation."""

import calendar
from datetime import date, timedelta

from src.domain.constants import MONTH_NAMES
from src.domain.models.ledger import Breakdown, PeriodKind, PeriodRange


def build_period_ranges(
    reference_month: date,
    period_kind: PeriodKind,
    breakdown: Breakdown = Breakdown.TOTAL,
) -> list[PeriodRange]:
    """Return ordered, non-overlapping ranges for the requested view.

    Args:
        reference_month: Any date inside the selected month.
        period_kind: Monthly, quarterly, yearly or trailing twelve months.
        breakdown: Single bucket or detailed split.

    Returns:
        list[PeriodRange]: Inclusive ranges, oldest first.
    """
    year = reference_month.year
    month = reference_month.month
    detailed = breakdown is Breakdown.DETAILED

    if period_kind is PeriodKind.MONTHLY:
        if detailed:
            return _weeks_of_month(year, month)
        return [_month_range(year, month, MONTH_NAMES[month - 1])]

    if period_kind is PeriodKind.QUARTERLY:
        quarter = quarter_of(month)
        quarters = range(1, quarter + 1) if detailed else (quarter,)
        return [_quarter_range(year, q) for q in quarters]

    if period_kind is PeriodKind.YEARLY:
        if detailed:
            return [
                _month_range(year, m, _short_month(m))
                for m in range(1, month + 1)
            ]
        return [PeriodRange(date(year, 1, 1), date(year, 12, 31), str(year))]

    if period_kind is PeriodKind.TRAILING_12:
        ranges = []
        for offset in range(11, -1, -1):
            y, m = shift_month(year, month, -offset)
            ranges.append(_month_range(y, m, _short_month(m)))
        return ranges

    raise ValueError(f"Unsupported period kind: {period_kind}")


def parse_reference_month(value: str) -> date:
    """Parse a month selector value.

    Args:
        value: ``June 2025``, ``Jun 2025`` or ``2025-06``.

    Returns:
        date: First day of the month.

    Raises:
        ValueError: If the value matches none of the accepted formats.
    """
    candidate = value.strip()
    parts = candidate.split()
    if len(parts) == 2 and parts[1].isdigit():
        name = parts[0].lower()
        for index, month_name in enumerate(MONTH_NAMES, start=1):
            if name in (month_name.lower(), month_name[:3].lower()):
                return date(int(parts[1]), index, 1)
    pieces = candidate.split("-")
    if len(pieces) == 2 and all(piece.isdigit() for piece in pieces):
        year, month = int(pieces[0]), int(pieces[1])
        if 1 <= month <= 12:
            return date(year, month, 1)
    raise ValueError(
        f"Invalid month '{value}'. Expected 'June 2025' or '2025-06'."
    )


def recent_months(today: date, count: int = 24) -> list[str]:
    """Return month selector labels, newest first.

    Args:
        today: Date of the most recent month.
        count: Number of months to list.

    Returns:
        list[str]: Labels such as ``June 2025``.
    """
    labels = []
    for offset in range(count):
        year, month = shift_month(today.year, today.month, -offset)
        labels.append(f"{MONTH_NAMES[month - 1]} {year}")
    return labels


def quarter_of(month: int) -> int:
    """Return the calendar quarter (1-4) of a month."""
    return (month - 1) // 3 + 1


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) moved by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _month_range(year: int, month: int, name: str) -> PeriodRange:
    last_day = calendar.monthrange(year, month)[1]
    return PeriodRange(
        start=date(year, month, 1),
        end=date(year, month, last_day),
        label=f"{name} {year}",
    )


def _quarter_range(year: int, quarter: int) -> PeriodRange:
    first_month = (quarter - 1) * 3 + 1
    last_month = first_month + 2
    return PeriodRange(
        start=date(year, first_month, 1),
        end=date(year, last_month, calendar.monthrange(year, last_month)[1]),
        label=f"Q{quarter} {year}",
    )


def _weeks_of_month(year: int, month: int) -> list[PeriodRange]:
    last = date(year, month, calendar.monthrange(year, month)[1])
    weeks = []
    start = date(year, month, 1)
    number = 1
    while start <= last:
        end = min(start + timedelta(days=6), last)
        weeks.append(
            PeriodRange(
                start=start,
                end=end,
                label=f"Week {number} ({start.day}-{end.day})",
            )
        )
        start += timedelta(days=7)
        number += 1
    return weeks


def _short_month(month: int) -> str:
    return MONTH_NAMES[month - 1][:3]


__all__ = [
    "build_period_ranges",
    "parse_reference_month",
    "recent_months",
    "quarter_of",
    "shift_month",
]
