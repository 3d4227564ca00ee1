"""Holds the latest P&L report across successive filter changes."""

from datetime import date

from src.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
    ProfitAndLossReport,
    ReportResult,
)
from src.domain.constants import ALL_PROPERTIES
from src.domain.models.ledger import Breakdown, PeriodKind
from src.infrastructure.logging.logger import get_app_logger


class ProfitAndLossSession:
    """Apply report results in request order, most recent request wins.

    Each refresh takes a request number before fetching. A result whose
    number is no longer the latest is returned to its caller but never
    replaces the session report. A failed refresh keeps the previous
    report.
    """

    def __init__(self, use_case: GetProfitAndLossUseCase, logger=None) -> None:
        self._use_case = use_case
        self._logger = logger or get_app_logger()
        self._latest_request = 0
        self._report: ProfitAndLossReport | None = None
        self._last_error: str | None = None

    @property
    def report(self) -> ProfitAndLossReport | None:
        return self._report

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def refresh(
        self,
        reference_month: date,
        period_kind: PeriodKind = PeriodKind.TRAILING_12,
        breakdown: Breakdown = Breakdown.TOTAL,
        property_name: str = ALL_PROPERTIES,
        group_by_property: bool = False,
    ) -> ReportResult:
        """Run the use case and apply its result if still current."""
        self._latest_request += 1
        request = self._latest_request
        result = self._use_case.execute(
            reference_month,
            period_kind=period_kind,
            breakdown=breakdown,
            property_name=property_name,
            group_by_property=group_by_property,
        )
        if request != self._latest_request:
            self._logger.info(
                f"Discarding stale report for request {request}; "
                f"latest is {self._latest_request}"
            )
            return result
        if result.success:
            self._report = result.report
            self._last_error = None
        else:
            self._last_error = result.error
        return result


__all__ = ["ProfitAndLossSession"]
