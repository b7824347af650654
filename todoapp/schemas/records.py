"""Owned records shared by todos and reminders, plus their request bodies."""
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


def strip_text(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class OwnedRecord(BaseModel):
    id: str
    text: str
    completed: bool = False
    owner_id: str
    owner_name: str
    created_at: datetime

    class Config:
        from_attributes = True


class TodoRecord(OwnedRecord):
    pass


class ReminderRecord(OwnedRecord):
    due_date: date
    time: str
    category: str = "Personal"


class TodoCreate(BaseModel):
    text: str = Field(max_length=2000)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        return strip_text(v)


class TodoUpdate(BaseModel):
    text: str = Field(max_length=2000)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        return strip_text(v)


class ReminderCreate(BaseModel):
    text: str = Field(max_length=2000)
    time: str = Field(min_length=1, max_length=40)
    due_date: date | None = None
    category: str = Field("Personal", min_length=1, max_length=60)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        return strip_text(v)


class ReminderUpdate(BaseModel):
    """Edits replace the whole text/time/date/category tuple."""

    text: str = Field(max_length=2000)
    time: str = Field(min_length=1, max_length=40)
    due_date: date
    category: str = Field(min_length=1, max_length=60)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        return strip_text(v)


class ReminderGroup(BaseModel):
    title: str
    reminders: list[ReminderRecord]
