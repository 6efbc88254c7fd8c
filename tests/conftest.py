# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from trakr.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than the real config,
    so tests never read or write the user's ~/.journal.
    """
    return SimpleNamespace(
        db_path=tmp_path / "journal" / "trakr.json",
        log_level="WARNING",
        log_file=None,
        strict_today=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    s = TaskStore(settings.db_path)
    s.load()
    return s
