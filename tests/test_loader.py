"""Tests for roster loading and load-time normalization."""
from pathlib import Path

from retorno.core.models import Status
from retorno.ingestion.loader import load_roster, record_from_row, records_from_rows


def test_record_from_row_applies_defaults():
    record = record_from_row(
        0, {"Codigo Cliente": 1234.0, "Nombre": "Ana", "Telefono": 5491122334455.0, "Productos": "Té"}
    )

    assert record.record_id == 0
    assert record.code == "1234"
    assert record.display_name == "Ana"
    assert record.phone == "5491122334455"
    assert record.products == "Té"
    assert record.status is Status.UNTOUCHED
    assert record.reason == ""
    assert record.ever_contacted is False


def test_record_from_row_prefers_first_name_and_code_columns():
    record = record_from_row(3, {"Codigo": "C1", "Codigo Cliente": "X9", "Cliente": "Ana", "Nombre": "Otra"})

    assert record.code == "C1"
    assert record.display_name == "Ana"


def test_record_from_row_uses_placeholder_name():
    record = record_from_row(0, {"Codigo": "C1", "Cliente": "   "})

    assert record.display_name == "Cliente"
    assert record.phone == ""


def test_record_from_row_keeps_every_column():
    row = {"Codigo": "C1", "Cliente": "Ana", "Zona": "Norte", "Vendedor": 7}
    record = record_from_row(0, row)

    assert record.fields == row
    assert record.fields is not row


def test_record_from_row_parses_exported_labels():
    purchased = record_from_row(0, {"Resultado": "Compró ✅", "Motivo": "stale", "Aparecio": "Sí"})
    not_purchased = record_from_row(1, {"Resultado": "No compró", "Motivo": "sin presupuesto", "Aparecio": "Si"})
    pending = record_from_row(2, {"Resultado": "Pendiente", "Aparecio": "No"})

    assert purchased.status is Status.PURCHASED
    assert purchased.reason == ""
    assert purchased.ever_contacted is True
    assert not_purchased.status is Status.NOT_PURCHASED
    assert not_purchased.reason == "sin presupuesto"
    assert pending.status is Status.PENDING
    assert pending.ever_contacted is True


def test_record_from_row_unknown_label_is_untouched(caplog):
    caplog.set_level("WARNING")

    record = record_from_row(4, {"Resultado": "Llamar mañana"})

    assert record.status is Status.UNTOUCHED
    assert "unknown Resultado label" in caplog.text


def test_records_from_rows_keeps_duplicate_codes(caplog):
    caplog.set_level("WARNING")

    records = records_from_rows([{"Codigo": "C1"}, {"Codigo": "C1"}, {"Codigo": "C2"}])

    assert [record.record_id for record in records] == [0, 1, 2]
    assert "duplicated customer codes: C1" in caplog.text


def test_load_roster_from_path(roster_path: Path):
    rows, alerts = load_roster(roster_path)

    assert alerts == []
    assert [row["Codigo"] for row in rows] == ["C100", "C200", "C300"]


def test_load_roster_missing_sheet_yields_empty_roster(make_workbook, caplog):
    caplog.set_level("WARNING")
    blob = make_workbook([["Cliente"], ["Ana"]], sheet_name="Hoja1")

    rows, alerts = load_roster(blob)

    assert rows == []
    assert alerts == ['No se encontró la hoja "retorno"']
    assert "Roster sheet missing" in caplog.text


def test_load_roster_unreadable_sources_yield_empty_roster(tmp_path: Path, caplog):
    caplog.set_level("ERROR")

    missing_rows, missing_alerts = load_roster(tmp_path / "nope.xlsx")
    corrupt_rows, corrupt_alerts = load_roster(b"\x00\x01corrupt")

    assert missing_rows == [] and corrupt_rows == []
    assert len(missing_alerts) == 1 and len(corrupt_alerts) == 1
    assert "nope.xlsx" in caplog.text


def test_load_roster_empty_sheet_alerts(make_workbook):
    rows, alerts = load_roster(make_workbook([["Codigo", "Cliente"]]))

    assert rows == []
    assert alerts == ['No se encontraron datos en la hoja "retorno"']
