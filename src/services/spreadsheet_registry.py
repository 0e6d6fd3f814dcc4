"""
Imported spreadsheets kept in the local store
"""

import csv
import io
from typing import Any, Dict, List, Optional
from pydantic import ValidationError as PydanticValidationError
from src.models.project import ProjectFile
from src.models.spreadsheet import ImportedSpreadsheet, SpreadsheetRow
from src.models.task import TaskProgress
from src.services.local_store import LocalStore
from src.services.status_classifier import status_from_percentage
from src.utils.date_utils import get_current_datetime
from src.utils.logger import logger
from src.utils.numbers import clamp_percent, parse_int

SPREADSHEETS_KEY = "importedSpreadsheets"

# Spreadsheet header -> row field
COLUMN_MAP = {
    "Número": "number",
    "Classificação": "classification",
    "Categoria": "category",
    "Fase": "phase",
    "Condição": "condition",
    "Nome": "name",
    "Duração": "duration",
    "Como Fazer": "how_to",
    "Documento Referência": "reference_document",
}
COMPLETION_HEADER = "% Concluído"
EXPORT_COMPLETION_HEADER = "% Concluída"


def process_rows(rows: List[Dict[str, Any]]) -> List[SpreadsheetRow]:
    """
    Convert spreadsheet rows (keyed by header) into typed rows

    Missing numbers fall back to the 1-based row position; the completion
    cell may be "45%" or a number.

    Args:
        rows: Rows as parsed from the sheet

    Returns:
        SpreadsheetRow list with derived status
    """
    now = get_current_datetime()
    stamp = int(now.timestamp() * 1000)
    processed = []
    for index, row in enumerate(rows):
        text_fields = {
            field: "" if row.get(header) is None else str(row.get(header))
            for header, field in COLUMN_MAP.items()
            if field != "number"
        }
        completion = clamp_percent(row.get(COMPLETION_HEADER))
        processed.append(SpreadsheetRow(
            id=f"{stamp}_{index}",
            number=parse_int(row.get("Número"), default=0) or index + 1,
            completion_pct=completion,
            status=status_from_percentage(completion),
            timestamp=now,
            **text_fields,
        ))
    return processed


class SpreadsheetRegistry:
    """Newest-first list of imported spreadsheets"""

    def __init__(self, store: LocalStore):
        self.store = store
        self.logger = logger
        self.spreadsheets: List[ImportedSpreadsheet] = []
        self._load()

    def _load(self):
        try:
            raw = self.store.get(SPREADSHEETS_KEY) or []
            self.spreadsheets = [ImportedSpreadsheet.model_validate(item) for item in raw]
        except (PydanticValidationError, TypeError) as e:
            self.logger.warning(f"[SpreadsheetRegistry] Error loading spreadsheets: {e}")
            self.spreadsheets = []
            self.store.remove(SPREADSHEETS_KEY)

    def _save(self):
        self.store.set(SPREADSHEETS_KEY, [s.model_dump(mode="json") for s in self.spreadsheets])

    def add(self, spreadsheet: ImportedSpreadsheet):
        self.spreadsheets = [spreadsheet, *self.spreadsheets]
        self._save()

    def sync_files(self, files: List[ProjectFile]) -> int:
        """
        Register backend files that are not known locally yet

        Returns:
            Number of spreadsheets added
        """
        known = {s.id for s in self.spreadsheets}
        added = 0
        for file in files:
            if not file.id or file.id in known:
                continue
            self.spreadsheets.insert(0, ImportedSpreadsheet(
                id=file.id,
                name=file.name,
                project=file.project,
                imported_at=file.imported_at or get_current_datetime(),
            ))
            known.add(file.id)
            added += 1
        if added:
            self._save()
            self.logger.info(f"[SpreadsheetRegistry] Registered {added} backend files")
        return added

    def update(self, spreadsheet_id: str, **changes) -> Optional[ImportedSpreadsheet]:
        updated = None
        for index, spreadsheet in enumerate(self.spreadsheets):
            if spreadsheet.id == spreadsheet_id:
                updated = spreadsheet.model_copy(update=changes)
                self.spreadsheets[index] = updated
        self._save()
        return updated

    def delete(self, spreadsheet_id: str):
        self.spreadsheets = [s for s in self.spreadsheets if s.id != spreadsheet_id]
        self._save()

    def get(self, spreadsheet_id: str) -> Optional[ImportedSpreadsheet]:
        for spreadsheet in self.spreadsheets:
            if spreadsheet.id == spreadsheet_id:
                return spreadsheet
        return None

    def clear(self):
        self.spreadsheets = []
        self.store.remove(SPREADSHEETS_KEY)

    def total_progress(self) -> TaskProgress:
        """Completed rows over all spreadsheets"""
        total = sum(s.total_rows for s in self.spreadsheets)
        completed = sum(s.completed_rows for s in self.spreadsheets)
        return TaskProgress(total=total, concluded=completed)

    def export_csv(self, spreadsheet_id: str) -> Optional[str]:
        """
        CSV export of a spreadsheet (every value quoted)

        Returns:
            CSV text, or None when the spreadsheet is unknown or empty
        """
        spreadsheet = self.get(spreadsheet_id)
        if spreadsheet is None or not spreadsheet.data:
            return None

        headers = list(COLUMN_MAP) + [EXPORT_COMPLETION_HEADER, "Status"]
        output = io.StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(headers)
        for row in spreadsheet.data:
            writer.writerow([
                row.number,
                row.classification,
                row.category,
                row.phase,
                row.condition,
                row.name,
                row.duration,
                row.how_to,
                row.reference_document,
                f"{row.completion_pct}%",
                row.status,
            ])
        return output.getvalue()
