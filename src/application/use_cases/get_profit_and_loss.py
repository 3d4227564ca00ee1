"""Use case to build the profit-and-loss report for a period."""

from dataclasses import dataclass, field
from datetime import date

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    LedgerSourceError,
)
from src.application.ports.validation_cache import ValidationCachePort
from src.domain.constants import ALL_PROPERTIES, TRAILING_12_LABEL
from src.domain.models.ledger import (
    Breakdown,
    LedgerEntry,
    PeriodKind,
    PeriodRange,
)
from src.domain.models.pnl import (
    AccountAggregate,
    AccountGroup,
    EntryValidationReport,
    ExpenseSlice,
    PeriodBucket,
    ProfitAndLossKpis,
    TrendPoint,
)
from src.domain.services.aggregation import (
    aggregate_entries,
    group_accounts_by_parent,
    merge_accounts,
    merge_buckets,
)
from src.domain.services.kpis import (
    compute_kpis,
    compute_property_breakdown,
    compute_trend,
    expense_breakdown,
)
from src.domain.services.periods import build_period_ranges
from src.domain.services.validation import validate_entries
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_ROW_LIMIT = 10000


@dataclass(frozen=True)
class ReportSummary:
    """Parameters and counters of a generated report."""

    period_kind: PeriodKind
    breakdown: Breakdown
    property_name: str
    group_by_property: bool
    ranges: tuple[PeriodRange, ...]
    entries_fetched: int

    @property
    def periods_generated(self) -> int:
        return len(self.ranges)


@dataclass(frozen=True)
class ProfitAndLossReport:
    """Everything a renderer needs for the P&L view."""

    buckets: list[PeriodBucket]
    accounts: list[AccountAggregate]
    groups: list[AccountGroup]
    kpis: ProfitAndLossKpis
    trend: list[TrendPoint]
    properties: list[str]
    summary: ReportSummary
    validations: list[EntryValidationReport] = field(default_factory=list)
    expenses: list[ExpenseSlice] = field(default_factory=list)

    @property
    def periods(self) -> list[str]:
        return [bucket.label for bucket in self.buckets]


@dataclass(frozen=True)
class ReportResult:
    """Outcome of a report request."""

    success: bool
    report: ProfitAndLossReport | None = None
    error: str | None = None


class GetProfitAndLossUseCase:
    """Fetch ledger lines and aggregate them into the P&L report."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        validation_cache: ValidationCachePort | None = None,
        row_limit: int = DEFAULT_ROW_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger lines.
            logger: Optional logger compatible with logging.Logger-like API.
            validation_cache: Optional cache for batch validation reports.
            row_limit: Maximum rows requested per period.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._validation_cache = validation_cache
        self._row_limit = row_limit

    def execute(
        self,
        reference_month: date,
        period_kind: PeriodKind = PeriodKind.TRAILING_12,
        breakdown: Breakdown = Breakdown.TOTAL,
        property_name: str = ALL_PROPERTIES,
        group_by_property: bool = False,
    ) -> ReportResult:
        """Return the P&L report, or a failed result if the source errors.

        Args:
            reference_month: Any date in the selected month.
            period_kind: Reporting period.
            breakdown: Single bucket or detailed split.
            property_name: Property filter; ignored when grouping by
                property, which always needs every property.
            group_by_property: Break accounts out per property.

        Returns:
            ReportResult: Report on success, error message otherwise.
        """
        ranges = build_period_ranges(reference_month, period_kind, breakdown)
        property_filter = None
        if not group_by_property and property_name != ALL_PROPERTIES:
            property_filter = property_name

        entries: list[LedgerEntry] = []
        validations: list[EntryValidationReport] = []
        try:
            for period in ranges:
                batch = self._ledger_repository.fetch_entries(
                    period.start,
                    period.end,
                    property_name=property_filter,
                    limit=self._row_limit,
                )
                self._logger.info(
                    f"Fetched {len(batch)} ledger lines for {period.label}"
                )
                if len(batch) >= self._row_limit:
                    self._logger.warning(
                        f"Ledger fetch for {period.label} hit the row limit "
                        f"({self._row_limit}); results may be incomplete"
                    )
                validations.append(self._validate(batch, period.label))
                entries.extend(batch)
        except LedgerSourceError as exc:
            self._logger.error(f"Failed to fetch ledger lines: {exc}")
            return ReportResult(success=False, error=str(exc))

        buckets = aggregate_entries(entries, ranges, group_by_property)
        if period_kind is PeriodKind.TRAILING_12 and (
            breakdown is Breakdown.TOTAL or group_by_property
        ):
            buckets = [merge_buckets(buckets, TRAILING_12_LABEL)]

        accounts = merge_accounts(buckets)
        properties = _collect_properties(accounts) if group_by_property else []
        trend = (
            compute_property_breakdown(accounts, properties)
            if group_by_property
            else compute_trend(buckets)
        )
        kpis = compute_kpis(accounts)
        self._logger.info(
            f"P&L computed for {len(buckets)} period(s): "
            f"revenue={kpis.revenue}, net_income={kpis.net_income}"
        )
        report = ProfitAndLossReport(
            buckets=buckets,
            accounts=accounts,
            groups=group_accounts_by_parent(accounts),
            kpis=kpis,
            trend=trend,
            properties=properties,
            summary=ReportSummary(
                period_kind=period_kind,
                breakdown=breakdown,
                property_name=property_name,
                group_by_property=group_by_property,
                ranges=tuple(ranges),
                entries_fetched=len(entries),
            ),
            validations=validations,
            expenses=expense_breakdown(accounts),
        )
        return ReportResult(success=True, report=report)

    def _validate(
        self,
        batch: list[LedgerEntry],
        source: str,
    ) -> EntryValidationReport:
        if self._validation_cache is None:
            return validate_entries(batch, source, self._logger)
        key = (source, len(batch), tuple(batch[:5]))
        cached = self._validation_cache.get(key)
        if cached is not None:
            return cached
        report = validate_entries(batch, source, self._logger)
        self._validation_cache.set(key, report)
        return report


def _collect_properties(accounts: list[AccountAggregate]) -> list[str]:
    properties: set[str] = set()
    for account in accounts:
        properties.update(account.property_entries or {})
    return sorted(properties)


__all__ = [
    "GetProfitAndLossUseCase",
    "ProfitAndLossReport",
    "ReportResult",
    "ReportSummary",
]
