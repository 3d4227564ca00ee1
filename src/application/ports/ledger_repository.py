"""Port for reading ledger lines from the system of record."""

from datetime import date
from typing import Protocol

from src.domain.models.ledger import LedgerEntry


class LedgerSourceError(RuntimeError):
    """Raised when the ledger source cannot be reached or answers an error."""


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to ledger lines."""

    def fetch_entries(
        self,
        start_date: date,
        end_date: date,
        property_name: str | None = None,
        limit: int | None = None,
    ) -> list[LedgerEntry]:
        """Return ledger lines posted between the two dates (inclusive).

        Sources may cap the number of rows returned; callers must not
        assume the result is complete when it reaches ``limit``.
        """

    def fetch_properties(self) -> list[str]:
        """Return the distinct non-blank property labels."""


__all__ = ["LedgerRepositoryPort", "LedgerSourceError"]
