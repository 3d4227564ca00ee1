"""Use case to compare two periods or two properties side by side."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import ALL_PROPERTIES
from src.domain.models.ledger import LedgerEntry, PeriodRange
from src.domain.models.pnl import ProfitAndLossKpis, VarianceRow
from src.domain.services.aggregation import aggregate_entries, merge_accounts
from src.domain.services.comparison import compute_variance
from src.domain.services.kpis import compute_kpis
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ComparisonSide:
    """Date range and optional property of one side of a comparison."""

    start_date: date
    end_date: date
    property_name: str = ALL_PROPERTIES

    @property
    def label(self) -> str:
        base = f"{self.start_date.isoformat()}..{self.end_date.isoformat()}"
        if self.property_name == ALL_PROPERTIES:
            return base
        return f"{base} ({self.property_name})"


@dataclass(frozen=True)
class ComparisonView:
    """KPIs of both sides and the per-account variance table."""

    left: ProfitAndLossKpis
    right: ProfitAndLossKpis
    variance: list[VarianceRow]


class ComparePeriodsUseCase:
    """Compute KPIs and account variances for two ledger slices."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger lines.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        left: ComparisonSide,
        right: ComparisonSide,
    ) -> ComparisonView:
        """Return the comparison of ``left`` against ``right``.

        Raises:
            LedgerSourceError: If either fetch fails.
        """
        left_entries = self._fetch(left)
        right_entries = self._fetch(right)
        view = ComparisonView(
            left=self._kpis(left, left_entries),
            right=self._kpis(right, right_entries),
            variance=compute_variance(left_entries, right_entries),
        )
        self._logger.info(
            f"Compared {left.label} with {right.label}: "
            f"{len(view.variance)} accounts"
        )
        return view

    def _fetch(self, side: ComparisonSide) -> list[LedgerEntry]:
        property_filter = (
            None if side.property_name == ALL_PROPERTIES else side.property_name
        )
        return self._ledger_repository.fetch_entries(
            side.start_date,
            side.end_date,
            property_name=property_filter,
        )

    @staticmethod
    def _kpis(
        side: ComparisonSide,
        entries: list[LedgerEntry],
    ) -> ProfitAndLossKpis:
        period = PeriodRange(side.start_date, side.end_date, side.label)
        buckets = aggregate_entries(entries, [period])
        return compute_kpis(merge_accounts(buckets))


__all__ = ["ComparePeriodsUseCase", "ComparisonSide", "ComparisonView"]
