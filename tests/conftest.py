"""Pytest configuration to make the local package importable without installation."""
import io
import sys
from pathlib import Path

import pytest
from openpyxl import Workbook

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from retorno.core import config
from retorno.review.session import TriageSession

ROSTER_HEADER = ["Codigo", "Cliente", "Productos", "Telefono", "Zona"]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer env files and overrides out of the tests."""

    for key in (
        "RETORNO_INPUT_PATH",
        "RETORNO_SHEET_NAME",
        "RETORNO_CURSOR_PATH",
        "RETORNO_GREETING",
        "RETORNO_OPEN_BROWSER",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("RETORNO_ENV_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setattr(config, "_ENV_LOADED", False)


@pytest.fixture
def make_workbook():
    """Build ``.xlsx`` bytes from header + value lists without going through the codec."""

    def _make(rows: list[list], sheet_name: str = "retorno", extra_sheets: tuple[str, ...] = ()) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = sheet_name
        for row in rows:
            sheet.append(row)
        for name in extra_sheets:
            workbook.create_sheet(name)
        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def roster_rows() -> list[list]:
    """Header plus three untouched customers, one of them without a phone."""

    return [
        ROSTER_HEADER,
        ["C100", "Juan Pérez", "Yerba, Azúcar", 5491122334455, "Norte"],
        ["C200", "María Gómez", "Café", 5491166778899, "Sur"],
        ["C300", "Ana Ruiz", "Té", None, "Norte"],
    ]


@pytest.fixture
def roster_workbook(make_workbook, roster_rows) -> bytes:
    return make_workbook(roster_rows)


@pytest.fixture
def roster_path(tmp_path: Path, roster_workbook: bytes) -> Path:
    path = tmp_path / "base_no_compradores.xlsx"
    path.write_bytes(roster_workbook)
    return path


@pytest.fixture
def session(roster_workbook: bytes) -> TriageSession:
    triage = TriageSession()
    triage.load_workbook(roster_workbook)
    return triage
