"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort, LedgerSourceError
from .validation_cache import ValidationCachePort

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "LedgerSourceError",
    "ValidationCachePort",
]
