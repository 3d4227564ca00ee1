"""Simple CLI to validate the ledger source connection.

This adapter is meant for local operations: it builds the configured
ledger repository and runs a small read against it.
"""

from src.application.ports.ledger_repository import LedgerSourceError
from src.infrastructure.container import build_ledger_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def main() -> None:
    """Run a basic connectivity check against the ledger source."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    repository = build_ledger_repository(settings)
    logger.info(f"Ledger backend: {settings.backend} ({settings.table})")
    try:
        properties = repository.fetch_properties()
    except LedgerSourceError as exc:
        logger.error(f"Ledger source check failed: {exc}")
        return
    logger.info(
        f"Ledger source is reachable; {len(properties)} properties found."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
