"""Scheduling domain schemas - Pydantic models for validation"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ...shared.validators import validate_optional_time, validate_time_string
from .weeks import normalize_week_key


def _check_week_key(v: str) -> str:
    return normalize_week_key(v)


class EntryCreate(BaseModel):
    """Schema for creating a schedule entry. startTime defaults to the next free slot."""

    weekKey: str
    dayIndex: int = Field(..., ge=0, le=6)
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    description: str = ""
    isPrivate: bool = False

    @field_validator("weekKey")
    @classmethod
    def validate_week_key(cls, v):
        return _check_week_key(v)

    @field_validator("startTime")
    @classmethod
    def validate_start_time(cls, v):
        if v is None or v == "":
            return None
        return validate_time_string(v)

    @field_validator("endTime")
    @classmethod
    def validate_end_time(cls, v):
        return validate_optional_time(v)

    @model_validator(mode="after")
    def validate_range(self):
        if self.startTime and self.endTime and self.endTime <= self.startTime:
            raise ValueError("End time must be after start time")
        return self


class EntryUpdate(BaseModel):
    """Schema for a partial update. An empty endTime clears the end (open-ended)."""

    startTime: Optional[str] = None
    endTime: Optional[str] = None
    description: Optional[str] = None
    isPrivate: Optional[bool] = None

    @field_validator("startTime")
    @classmethod
    def validate_start_time(cls, v):
        if v is None:
            return v
        return validate_time_string(v)

    @field_validator("endTime")
    @classmethod
    def validate_end_time(cls, v):
        if v is None or v == "":
            return v
        return validate_time_string(v)


class EntryResponse(BaseModel):
    """Schema for a schedule entry as the client sees it"""

    id: str
    startTime: str
    endTime: str  # "" when open-ended
    description: str
    isPrivate: bool


class OverviewEntryResponse(EntryResponse):
    hasConflict: bool = False


class WeekScheduleResponse(BaseModel):
    weekKey: str
    schedule: dict[int, list[EntryResponse]]


class DayOverviewResponse(BaseModel):
    dayIndex: int
    dayName: str
    date: datetime.date
    entries: list[OverviewEntryResponse]
    nextAvailableTime: str


class WeekOverviewResponse(BaseModel):
    weekKey: str
    previousWeekKey: str
    nextWeekKey: str
    days: list[DayOverviewResponse]


class PublicScheduleResponse(BaseModel):
    schedule: dict[int, list[EntryResponse]]
    username: str


class PublicPageResponse(BaseModel):
    username: str
    weekKey: str
    weekDates: list[datetime.date]
    schedule: dict[int, list[EntryResponse]]
