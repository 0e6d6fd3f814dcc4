"""
Tests for imported spreadsheets
"""

import csv
import io
from datetime import datetime
from src.models.project import ProjectFile
from src.models.spreadsheet import ImportedSpreadsheet
from src.services.spreadsheet_registry import SpreadsheetRegistry, process_rows

SHEET_ROWS = [
    {"Número": 1, "Classificação": "A", "Categoria": "Blisters", "Fase": "Projeto", "Condição": "Sempre",
     "Nome": "Definir embalagem", "Duração": 5, "% Concluído": 100},
    {"Número": None, "Nome": "Testar selagem", "Duração": "3 dias", "% Concluído": "45%"},
    {"Nome": "Comprar insumos", "% Concluído": -10},
]


def make_spreadsheet(spreadsheet_id="s1", rows=SHEET_ROWS):
    data = process_rows(rows)
    return ImportedSpreadsheet(
        id=spreadsheet_id,
        name="cronograma.xlsx",
        project="Alpha",
        data=data,
        imported_at=datetime(2024, 11, 1, 9, 0),
        total_rows=len(data),
        completed_rows=sum(1 for row in data if row.completion_pct >= 100),
    )


def test_process_rows():
    rows = process_rows(SHEET_ROWS)

    assert [row.number for row in rows] == [1, 2, 3]
    assert rows[0].classification == "A"
    assert rows[0].duration == "5"
    assert rows[0].status == "Concluído"
    assert rows[1].completion_pct == 45
    assert rows[1].status == "Em Andamento"
    assert rows[2].completion_pct == 0
    assert rows[2].status == "Não Iniciado"
    assert rows[2].category == ""
    assert len({row.id for row in rows}) == 3


def test_add_and_reload(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("s1"))
    registry.add(make_spreadsheet("s2"))

    reloaded = SpreadsheetRegistry(local_store)

    assert [s.id for s in reloaded.spreadsheets] == ["s2", "s1"]
    assert reloaded.get("s1").data[1].name == "Testar selagem"


def test_sync_files_registers_unknown_files(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("7"))
    files = [
        ProjectFile(id="7", name="cronograma.xlsx"),
        ProjectFile(id="8", name="outro.xlsx", project="Beta"),
        ProjectFile(id="", name="sem id"),
    ]

    assert registry.sync_files(files) == 1
    assert registry.sync_files(files) == 0
    assert registry.get("8").project == "Beta"


def test_update_and_delete(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("s1"))

    updated = registry.update("s1", name="renomeada.xlsx")
    assert updated.name == "renomeada.xlsx"
    assert registry.get("s1").name == "renomeada.xlsx"
    assert registry.update("missing", name="x") is None

    registry.delete("s1")
    assert registry.get("s1") is None


def test_total_progress(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("s1"))
    registry.add(make_spreadsheet("s2"))

    progress = registry.total_progress()

    assert progress.total == 6
    assert progress.concluded == 2
    assert progress.completion_rate == 33


def test_export_csv(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("s1"))

    content = registry.export_csv("s1")
    rows = list(csv.reader(io.StringIO(content)))

    assert content.startswith('"Número","Classificação"')
    assert rows[0][-2:] == ["% Concluída", "Status"]
    assert rows[1][0] == "1"
    assert rows[2][-2:] == ["45%", "Em Andamento"]
    assert len(rows) == 4


def test_export_unknown_or_empty(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("empty", rows=[]))
    assert registry.export_csv("empty") is None
    assert registry.export_csv("missing") is None


def test_clear(local_store):
    registry = SpreadsheetRegistry(local_store)
    registry.add(make_spreadsheet("s1"))
    registry.clear()
    assert registry.spreadsheets == []
    assert "importedSpreadsheets" not in local_store
