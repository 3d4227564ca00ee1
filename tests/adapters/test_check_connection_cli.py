"""Tests for the check_connection_cli adapter."""

from unittest.mock import MagicMock

import pytest

from src.adapters import check_connection_cli
from src.application.ports.ledger_repository import LedgerSourceError
from src.infrastructure.settings import LedgerSettings


@pytest.fixture
def logger(monkeypatch):
    fake = MagicMock()
    monkeypatch.setattr(check_connection_cli, "get_app_logger", lambda: fake)
    return fake


def test_main_logs_property_count(logger, monkeypatch) -> None:
    """The connection check should log how many properties were found."""
    repository = MagicMock()
    repository.fetch_properties.return_value = ["Maple", "Oak"]
    monkeypatch.setattr(
        check_connection_cli.LedgerSettings,
        "from_env",
        classmethod(lambda cls: LedgerSettings(backend="sqlalchemy")),
    )
    monkeypatch.setattr(
        check_connection_cli,
        "build_ledger_repository",
        lambda settings: repository,
    )

    check_connection_cli.main()

    messages = [call.args[0] for call in logger.info.call_args_list]
    assert "Ledger backend: sqlalchemy (financial_transactions)" in messages
    assert "2 properties found" in messages[-1]


def test_main_logs_failures(logger, monkeypatch) -> None:
    """A failing source should be logged as an error."""
    repository = MagicMock()
    repository.fetch_properties.side_effect = LedgerSourceError("refused")
    monkeypatch.setattr(
        check_connection_cli.LedgerSettings,
        "from_env",
        classmethod(lambda cls: LedgerSettings()),
    )
    monkeypatch.setattr(
        check_connection_cli,
        "build_ledger_repository",
        lambda settings: repository,
    )

    check_connection_cli.main()

    logger.error.assert_called_once()
