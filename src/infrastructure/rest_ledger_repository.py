"""REST-backed repository for ledger lines.

Talks to a PostgREST-style endpoint (``/rest/v1/<table>``) that filters
with ``column=op.value`` query parameters and authenticates with an API
key sent both as ``apikey`` and as a bearer token.
"""

from datetime import date

import requests

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    LedgerSourceError,
)
from src.domain.models.ledger import LedgerEntry
from src.infrastructure.ledger_rows import ledger_entry_from_row
from src.infrastructure.logging.logger import get_app_logger


class RestLedgerRepository(LedgerRepositoryPort):
    """Repository reading ledger lines over HTTP."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "financial_transactions",
        timeout: float = 30.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            base_url: Project URL, without the ``/rest/v1`` suffix.
            api_key: API key for the endpoint.
            table: Resource holding the ledger lines.
            timeout: Request timeout in seconds.
            session: Optional requests session (shared connection pool).
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._url = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self._api_key = api_key
        self._timeout = timeout
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def fetch_entries(
        self,
        start_date: date,
        end_date: date,
        property_name: str | None = None,
        limit: int | None = None,
    ) -> list[LedgerEntry]:
        params: list[tuple[str, str]] = [
            ("select", "*"),
            ("date", f"gte.{start_date.isoformat()}"),
            ("date", f"lte.{end_date.isoformat()}"),
            ("order", "date.asc"),
        ]
        if property_name:
            params.append(("class", f"eq.{property_name}"))
        if limit:
            params.append(("limit", str(limit)))
        payload = self._get(params)
        return [ledger_entry_from_row(row) for row in payload if row]

    def fetch_properties(self) -> list[str]:
        payload = self._get([("select", "class")])
        labels = {
            row["class"].strip()
            for row in payload
            if row and isinstance(row.get("class"), str) and row["class"].strip()
        }
        return sorted(labels)

    def _get(self, params: list[tuple[str, str]]) -> list[dict]:
        """Run a GET request and return the decoded JSON rows.

        Raises:
            LedgerSourceError: On transport errors, non-200 answers or a
                payload that is not a JSON array.
        """
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }
        try:
            response = self._session.get(
                self._url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise LedgerSourceError(f"Ledger API unreachable: {exc}") from exc

        if response.status_code != 200:
            raise LedgerSourceError(
                f"Ledger API error {response.status_code}: {response.text}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise LedgerSourceError("Ledger API returned invalid JSON") from exc
        if not isinstance(payload, list):
            raise LedgerSourceError("Ledger API returned an unexpected payload")
        self._logger.debug(f"Ledger API returned {len(payload)} rows")
        return payload


__all__ = ["RestLedgerRepository"]
