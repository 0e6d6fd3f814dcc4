"""
Project (imported schedule file) model
"""

from typing import Any, Optional
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from src.utils.date_parser import parse_date


class ProjectFile(BaseModel):
    """Schedule file uploaded to the backend"""
    
    model_config = ConfigDict(populate_by_name=True)
    
    id: str = Field(validation_alias=AliasChoices("id", "id_file"))
    name: str = Field("", validation_alias=AliasChoices("name", "nome"))
    project: str = Field("Projeto", validation_alias=AliasChoices("project", "projeto"))
    imported_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("imported_at", "importedAt"))
    
    @field_validator("id", "name", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()
    
    @field_validator("project", mode="before")
    @classmethod
    def _coerce_project(cls, value: Any) -> str:
        text = "" if value is None else str(value).strip()
        return text or "Projeto"
    
    @field_validator("imported_at", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Optional[datetime]:
        return parse_date(value)
    
    @property
    def label(self) -> str:
        """Selector label: "<project> | <file name>" """
        return f"{self.project} | {self.name}".strip()


class ProjectOption(BaseModel):
    """Option of the project selector"""
    
    id: str
    label: str
