"""Shared pytest fixtures."""

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True, scope="session")
def _logs_in_tmp_dir(tmp_path_factory):
    """Keep log files written during tests out of the repository."""
    root = tmp_path_factory.mktemp("project")
    patcher = pytest.MonkeyPatch()
    patcher.setattr(logger_module, "get_project_root", lambda: root)
    yield root
    patcher.undo()
