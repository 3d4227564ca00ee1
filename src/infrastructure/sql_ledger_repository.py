"""SQLAlchemy-backed repository for ledger lines."""

from datetime import date
import re

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    LedgerSourceError,
)
from src.domain.models.ledger import LedgerEntry
from src.infrastructure.ledger_rows import ledger_entry_from_row

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading ledger lines from a SQL table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        table: str = "financial_transactions",
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            table: Table name, optionally schema-qualified.

        Raises:
            ValueError: If the table name is not a plain identifier.
        """
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid ledger table name: {table}")
        self._db_port = db_port
        self._table = table

    def fetch_entries(
        self,
        start_date: date,
        end_date: date,
        property_name: str | None = None,
        limit: int | None = None,
    ) -> list[LedgerEntry]:
        query = self._build_entries_query(property_name, limit)
        params: dict[str, object] = {
            "start_date": start_date,
            "end_date": end_date,
        }
        if property_name:
            params["property_name"] = property_name
        if limit:
            params["limit"] = limit
        rows = self._execute(query, params)
        return [ledger_entry_from_row(row._mapping) for row in rows]

    def fetch_properties(self) -> list[str]:
        query = text(
            f"""
            SELECT DISTINCT class
            FROM {self._table}
            WHERE class IS NOT NULL AND TRIM(class) <> ''
            ORDER BY class
            """
        )
        rows = self._execute(query, {})
        return [row[0].strip() for row in rows]

    def _build_entries_query(
        self,
        property_name: str | None,
        limit: int | None,
    ):
        base_sql = f"""
        SELECT *
        FROM {self._table}
        WHERE date >= :start_date AND date <= :end_date
        """
        if property_name:
            base_sql += " AND class = :property_name"
        base_sql += " ORDER BY date, id"
        if limit:
            base_sql += " LIMIT :limit"
        return text(base_sql)

    def _execute(self, query, params: dict[str, object]):
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise LedgerSourceError(f"Ledger query failed: {exc}") from exc


__all__ = ["SqlAlchemyLedgerRepository"]
