"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("rest", "sqlalchemy")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reaching the ledger source.

    Attributes:
        backend: Backend identifier (rest or sqlalchemy).
        rest_url: Base URL of the REST endpoint (rest backend).
        api_key: API key sent with REST requests.
        table: Table or resource holding the ledger lines.
        row_limit: Maximum rows requested per period.
        http_timeout: REST request timeout in seconds.
        default_properties: Property labels always offered as filters.
        cache_ttl: Validation cache lifetime in seconds.
    """

    backend: str = "rest"
    rest_url: str | None = None
    api_key: str | None = None
    table: str = "financial_transactions"
    row_limit: int = 10000
    http_timeout: float = 30.0
    default_properties: tuple[str, ...] = ()
    cache_ttl: float = 300.0

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Values from a local ``.env`` file are loaded first.

        Returns:
            LedgerSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the backend is not supported.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("LEDGER_BACKEND", "rest").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported ledger backend: {backend}. "
                "Expected rest or sqlalchemy."
            )
        rest_url = os.getenv("LEDGER_REST_URL") or None
        if rest_url:
            rest_url = rest_url.rstrip("/")
        return cls(
            backend=backend,
            rest_url=rest_url,
            api_key=os.getenv("LEDGER_API_KEY") or None,
            table=os.getenv("LEDGER_TABLE", "financial_transactions").strip(),
            row_limit=cls._read_number(
                "LEDGER_ROW_LIMIT", 10000, int, logger
            ),
            http_timeout=cls._read_number(
                "LEDGER_HTTP_TIMEOUT", 30.0, float, logger
            ),
            default_properties=cls._split_list(
                os.getenv("LEDGER_DEFAULT_PROPERTIES", "")
            ),
            cache_ttl=cls._read_number(
                "VALIDATION_CACHE_TTL", 300.0, float, logger
            ),
        )

    @staticmethod
    def _read_number(name: str, default, cast, logger):
        """Read a positive number, falling back to the default.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            cast: ``int`` or ``float``.
            logger: Logger used for warnings.

        Returns:
            The parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value

    @staticmethod
    def _split_list(raw: str) -> tuple[str, ...]:
        return tuple(item.strip() for item in raw.split(",") if item.strip())


__all__ = ["LedgerSettings", "SUPPORTED_BACKENDS"]
