"""Application use cases package."""

from .compare_periods import (
    ComparePeriodsUseCase,
    ComparisonSide,
    ComparisonView,
)
from .get_profit_and_loss import (
    GetProfitAndLossUseCase,
    ProfitAndLossReport,
    ReportResult,
    ReportSummary,
)
from .get_properties import GetPropertiesUseCase
from .report_session import ProfitAndLossSession

__all__ = [
    "ComparePeriodsUseCase",
    "ComparisonSide",
    "ComparisonView",
    "GetProfitAndLossUseCase",
    "ProfitAndLossReport",
    "ReportResult",
    "ReportSummary",
    "GetPropertiesUseCase",
    "ProfitAndLossSession",
]
