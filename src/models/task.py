"""
Task models
"""

from typing import Any, Optional
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from src.utils.date_parser import parse_date
from src.utils.numbers import clamp_percent, parse_duration_days, parse_int, parse_progress, round_half_up


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class Task(BaseModel):
    """
    Task row of an imported schedule or an employee assignment
    
    Backend payloads mix Portuguese and English keys depending on the
    endpoint; every accepted spelling is listed in the field aliases.
    Malformed values are defaulted here instead of at each call site.
    """
    
    model_config = ConfigDict(populate_by_name=True)
    
    id: str = ""
    number: Optional[int] = Field(None, validation_alias=AliasChoices("number", "num", "numero"))
    classification: str = Field("", validation_alias=AliasChoices("classification", "classe", "classificacao"))
    category: str = Field("", validation_alias=AliasChoices("category", "categoria"))
    phase: str = Field("", validation_alias=AliasChoices("phase", "fase"))
    condition: str = Field("", validation_alias=AliasChoices("condition", "condicao", "status"))
    name: str = Field("", validation_alias=AliasChoices("name", "nome"))
    duration_days: int = Field(1, validation_alias=AliasChoices("duration_days", "duration", "duracao"))
    completion_pct: int = Field(0, validation_alias=AliasChoices("completion_pct", "conclusion", "percentualConcluido"))
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    deadline: Optional[datetime] = None
    delay_days: int = Field(0, validation_alias=AliasChoices("delay_days", "atraso", "delay"))
    responsible_id: Optional[str] = Field(None, validation_alias=AliasChoices("responsible_id", "id_responsavel"))
    responsible_name: str = Field("", validation_alias=AliasChoices("responsible_name", "responsavel", "responsible"))
    how_to: str = Field("", validation_alias=AliasChoices("how_to", "como_fazer", "comoFazer"))
    reference_url: str = Field("", validation_alias=AliasChoices("reference_url", "documento_referencia", "documentoReferencia"))
    file_id: Optional[str] = Field(None, validation_alias=AliasChoices("file_id", "id_file"))
    project_name: Optional[str] = None
    
    @field_validator(
        "classification", "category", "phase", "condition", "name",
        "responsible_name", "how_to", "reference_url", mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _text(value)
    
    @field_validator("number", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        return parse_int(value, default=0)
    
    @field_validator("duration_days", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> int:
        return parse_duration_days(value)
    
    @field_validator("completion_pct", mode="before")
    @classmethod
    def _coerce_completion(cls, value: Any) -> int:
        return parse_progress(value)
    
    @field_validator("delay_days", mode="before")
    @classmethod
    def _coerce_delay(cls, value: Any) -> int:
        return max(0, parse_int(value, default=0))
    
    @field_validator("start_date", "end_date", "deadline", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Optional[datetime]:
        return parse_date(value)
    
    @field_validator("responsible_id", "file_id", "project_name", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> Optional[str]:
        text = _text(value)
        return text or None
    
    @model_validator(mode="after")
    def _default_id(self) -> "Task":
        if not self.id and self.number is not None:
            self.id = str(self.number)
        return self
    
    @property
    def has_started(self) -> bool:
        """Task was started (has a start timestamp)"""
        return self.start_date is not None


class TaskUpdate(BaseModel):
    """Schedule row update payload (PATCH arquivo/{id}/linha/{num})"""
    
    model_config = ConfigDict(populate_by_name=True)
    
    number: Optional[int] = Field(None, alias="num")
    classification: str = Field("", alias="classe")
    category: str = ""
    phase: str = ""
    condition: str = Field("", alias="status")
    name: str = ""
    duration: str = ""
    conclusion: float = 0.0  # 0..1
    responsible: str = ""
    
    @classmethod
    def from_task(cls, task: Task, is_new: bool = False) -> "TaskUpdate":
        """
        Build the payload for a task edited in the schedule table
        
        Args:
            task: Edited task
            is_new: Row does not exist on the backend yet
            
        Returns:
            TaskUpdate payload
        """
        return cls(
            number=None if is_new else task.number,
            classification=task.classification,
            category=task.category,
            phase=task.phase,
            condition=task.condition,
            name=task.name,
            duration=str(task.duration_days),
            conclusion=clamp_percent(task.completion_pct) / 100,
            responsible=task.responsible_name.strip(),
        )
    
    def to_payload(self) -> dict:
        """Serialize with backend key names"""
        return self.model_dump(by_alias=True, exclude_none=True)


class EmployeeTaskUpdate(BaseModel):
    """Employee task update payload (PATCH employee/tasks/update/{file}/{num})"""
    
    duration: str = "1"
    conclusion: float = 0.0  # 0..1
    
    @classmethod
    def from_progress(cls, duration_days: Any, progress_pct: Any) -> "EmployeeTaskUpdate":
        return cls(
            duration=str(parse_duration_days(duration_days)),
            conclusion=clamp_percent(progress_pct) / 100,
        )


class TaskProgress(BaseModel):
    """Task counters per status"""
    
    total: int = 0
    concluded: int = 0
    in_progress: int = 0
    not_started: int = 0
    overdue: int = 0
    
    @field_validator("total", "concluded", "in_progress", "not_started", "overdue", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return max(0, parse_int(value, default=0))
    
    @property
    def completion_rate(self) -> int:
        """Share of concluded tasks, in percent"""
        if self.total <= 0:
            return 0
        return round_half_up(self.concluded / self.total * 100)
