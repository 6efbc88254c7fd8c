# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from trakr.cli.bootstrap import create_store
from trakr.config import Settings


def test_defaults_point_at_home_journal(monkeypatch, tmp_path: Path) -> None:
    for name in ("TRAKR_DB_PATH", "TRAKR_LOG_LEVEL", "TRAKR_LOG_FILE", "TRAKR_STRICT_TODAY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    s = Settings.from_env()
    assert s.db_path == tmp_path / ".journal" / "trakr.json"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.strict_today is False


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TRAKR_DB_PATH", str(tmp_path / "t.json"))
    monkeypatch.setenv("TRAKR_LOG_FILE", str(tmp_path / "trakr.log"))
    monkeypatch.setenv("TRAKR_STRICT_TODAY", "yes")

    s = Settings.from_env()
    assert s.db_path == tmp_path / "t.json"
    assert s.log_file == tmp_path / "trakr.log"
    assert s.strict_today is True

    store = create_store(settings=s)
    assert store.path == tmp_path / "t.json"
