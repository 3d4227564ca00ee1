"""Port for caching batch validation reports."""

from collections.abc import Hashable
from typing import Protocol

from src.domain.models.pnl import EntryValidationReport


class ValidationCachePort(Protocol):
    """Port storing validation reports for recently seen batches."""

    def get(self, key: Hashable) -> EntryValidationReport | None:
        """Return a cached report, or None when missing or expired."""

    def set(self, key: Hashable, report: EntryValidationReport) -> None:
        """Store a report under the given key."""


__all__ = ["ValidationCachePort"]
