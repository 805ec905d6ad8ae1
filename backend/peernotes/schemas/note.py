"""Pydantic schemas for note request/response contracts."""

from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional
from datetime import datetime


class NoteCreate(BaseModel):
    # Blank values are rejected by the service with InvalidInput, not by schema validation.
    title: str = ""
    subject: str = ""
    content: str = ""
    tags: List[str] = []

    @field_validator("title", "subject", "content", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if value is None or value == "":
            return []
        if isinstance(value, str):
            return [value]
        return value


class NoteOut(BaseModel):
    id: int
    title: str
    subject: str
    content: str
    tags: List[str] = []
    likes: int
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_or_empty(cls, value: Any) -> Any:
        return value or []


class ReportedNoteOut(BaseModel):
    note_id: int
    title: str
    subject: str
    content: str
    reported_at: datetime

    model_config = {"from_attributes": True}


class StatsOut(BaseModel):
    visible_notes: int = Field(serialization_alias="visibleNotes")
    admin_removed: int = Field(serialization_alias="adminRemoved")
    auto_moderated: int = Field(serialization_alias="autoModerated")


class SuccessOut(BaseModel):
    success: bool = True
    message: Optional[str] = None
