"""Logging coverage to ensure problems are surfaced without stopping the session."""
import logging
from pathlib import Path

import pytest

from retorno.core import config
from retorno.core.logging import configure_logging
from retorno.ingestion import loader


def test_configure_logging_reads_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setattr(logging, "captureWarnings", lambda capture: captured.update(warnings=capture))

    configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]
    assert captured["warnings"] is True


def test_configure_logging_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setattr(logging, "captureWarnings", lambda capture: captured.update(warnings=capture))

    configure_logging("warning")

    assert captured["level"] == "WARNING"


def test_load_roster_logs_summary(roster_path: Path, caplog) -> None:
    caplog.set_level("INFO")

    loader.load_roster(roster_path)

    assert any("Loaded 3 roster rows" in message for message in caplog.messages)


def test_corrupt_workbook_is_logged_and_survives(tmp_path: Path, caplog) -> None:
    bad = tmp_path / "bad.xlsx"
    bad.write_bytes(b"<html>broken</html>")
    caplog.set_level("ERROR")

    rows, alerts = loader.load_roster(bad)

    assert rows == []
    assert alerts
    assert "bad.xlsx" in caplog.text


def test_env_file_fills_unset_settings_only(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / "retorno.env"
    env_file.write_text(
        "# local overrides\n"
        "RETORNO_SHEET_NAME='clientes'\n"
        "RETORNO_GREETING=\"Buen día {name}\"\n"
        "not a setting\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("RETORNO_ENV_FILE", str(env_file))
    # register both keys so monkeypatch removes whatever the env file sets
    monkeypatch.setenv("RETORNO_SHEET_NAME", "")
    monkeypatch.delenv("RETORNO_SHEET_NAME")
    monkeypatch.setenv("RETORNO_GREETING", "Hola de nuevo {name}")

    assert config.sheet_name() == "clientes"
    assert config.greeting_template() == "Hola de nuevo {name}"
