"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.compare_periods import ComparePeriodsUseCase
from src.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
)
from src.application.use_cases.get_properties import GetPropertiesUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.rest_ledger_repository import RestLedgerRepository
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sql_ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from src.infrastructure.validation_cache import ValidationCache


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    settings: LedgerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository.

    Raises:
        RuntimeError: If the REST backend lacks a URL or API key.
    """
    resolved = settings or LedgerSettings.from_env()
    if resolved.backend == "sqlalchemy":
        return SqlAlchemyLedgerRepository(
            db_port or build_database_adapter(),
            table=resolved.table,
        )
    if not resolved.rest_url or not resolved.api_key:
        raise RuntimeError(
            "REST backend requires LEDGER_REST_URL and LEDGER_API_KEY values."
        )
    return RestLedgerRepository(
        resolved.rest_url,
        resolved.api_key,
        table=resolved.table,
        timeout=resolved.http_timeout,
        logger=get_app_logger(),
    )


def build_profit_and_loss_use_case(
    settings: LedgerSettings | None = None,
    repository: LedgerRepositoryPort | None = None,
) -> GetProfitAndLossUseCase:
    """Return the P&L use case with its validation cache."""
    resolved = settings or LedgerSettings.from_env()
    return GetProfitAndLossUseCase(
        repository or build_ledger_repository(resolved),
        logger=get_app_logger(),
        validation_cache=ValidationCache(ttl_seconds=resolved.cache_ttl),
        row_limit=resolved.row_limit,
    )


def build_properties_use_case(
    settings: LedgerSettings | None = None,
    repository: LedgerRepositoryPort | None = None,
) -> GetPropertiesUseCase:
    """Return the property listing use case."""
    resolved = settings or LedgerSettings.from_env()
    return GetPropertiesUseCase(
        repository or build_ledger_repository(resolved),
        default_properties=resolved.default_properties,
        logger=get_app_logger(),
    )


def build_compare_periods_use_case(
    settings: LedgerSettings | None = None,
    repository: LedgerRepositoryPort | None = None,
) -> ComparePeriodsUseCase:
    """Return the comparative analysis use case."""
    resolved = settings or LedgerSettings.from_env()
    return ComparePeriodsUseCase(
        repository or build_ledger_repository(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_profit_and_loss_use_case",
    "build_properties_use_case",
    "build_compare_periods_use_case",
]
