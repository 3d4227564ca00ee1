"""Use case to list the property labels offered as filters."""

from collections.abc import Iterable

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    LedgerSourceError,
)
from src.domain.constants import ALL_PROPERTIES
from src.infrastructure.logging.logger import get_app_logger


class GetPropertiesUseCase:
    """Merge configured and stored property labels."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        default_properties: Iterable[str] = (),
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger lines.
            default_properties: Labels always offered, even without data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._default_properties = tuple(default_properties)
        self._logger = logger or get_app_logger()

    def execute(self) -> list[str]:
        """Return ``All Properties`` followed by the sorted labels.

        Falls back to the configured labels when the source fails.
        """
        try:
            stored = self._ledger_repository.fetch_properties()
        except LedgerSourceError as exc:
            self._logger.error(f"Property fetch failed: {exc}")
            stored = []
        labels = {
            label.strip()
            for label in (*self._default_properties, *stored)
            if label and label.strip() and label.strip() != ALL_PROPERTIES
        }
        return [ALL_PROPERTIES, *sorted(labels)]


__all__ = ["GetPropertiesUseCase"]
