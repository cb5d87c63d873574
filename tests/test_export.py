"""Tests for the full-roster Excel export."""
import io
from pathlib import Path

from openpyxl import load_workbook

from retorno.export.sinks import export_roster, write_excel
from retorno.review.session import TriageSession


def _sheet_rows(blob: bytes) -> list[dict]:
    sheet = load_workbook(io.BytesIO(blob))["retorno"]
    lines = [list(row) for row in sheet.iter_rows(values_only=True)]
    header = lines[0]
    return [dict(zip(header, line)) for line in lines[1:]]


def test_export_includes_every_status_and_column(session: TriageSession):
    session.contact(0)
    session.contact(1)
    session.select(1)
    session.record_outcome(purchased=True)

    rows = _sheet_rows(export_roster(session.store.all()))

    assert [row["Codigo"] for row in rows] == ["C100", "C200", "C300"]
    assert [row["Resultado"] or "" for row in rows] == ["Pendiente", "Compró", ""]
    assert [row["Aparecio"] for row in rows] == ["Sí", "Sí", "No"]
    assert {row["Zona"] for row in rows} == {"Norte", "Sur"}
    assert rows[0]["Telefono"] == 5491122334455


def test_write_excel_creates_parent_dirs(tmp_path: Path, session: TriageSession):
    target = tmp_path / "out" / "resultados.xlsx"

    returned = write_excel(session.store.all(), target)

    assert returned == target
    workbook = load_workbook(target)
    assert workbook.sheetnames == ["retorno"]
    assert workbook["retorno"].max_row == 4


def test_session_export_matches_sink(session: TriageSession):
    assert _sheet_rows(session.export()) == _sheet_rows(export_roster(session.store))
