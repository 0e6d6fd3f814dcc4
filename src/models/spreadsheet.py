"""
Imported spreadsheet models
"""

from enum import Enum
from typing import List
from datetime import datetime
from pydantic import BaseModel


class SpreadsheetType(str, Enum):
    """Kind of imported spreadsheet"""
    PRIMARY_PACKAGING = "embalagem_primaria"
    OTHER = "outros"


class SpreadsheetRow(BaseModel):
    """Row of an imported schedule spreadsheet"""
    
    id: str
    number: int
    classification: str = ""
    category: str = ""
    phase: str = ""
    condition: str = ""
    name: str = ""
    duration: str = ""
    how_to: str = ""
    reference_document: str = ""
    completion_pct: int = 0
    status: str = ""
    timestamp: datetime


class ImportedSpreadsheet(BaseModel):
    """Spreadsheet imported by the user"""
    
    id: str
    name: str
    project: str = ""
    type: SpreadsheetType = SpreadsheetType.OTHER
    data: List[SpreadsheetRow] = []
    imported_at: datetime
    total_rows: int = 0
    completed_rows: int = 0
