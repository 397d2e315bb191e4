"""Schedule router - FastAPI endpoints for the owner's weekly schedule"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ...auth import get_current_profile
from ...database import get_db
from ...models import UserProfile
from ...shared.validators import validate_uuid
from .public import entry_to_dict
from .schemas import (
    EntryCreate,
    EntryResponse,
    EntryUpdate,
    WeekOverviewResponse,
    WeekScheduleResponse,
)
from .service import ScheduleService
from .time_calculator import time_options
from .weeks import current_week_key, normalize_week_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["Schedules"])


def get_schedule_service(db: Session = Depends(get_db)) -> ScheduleService:
    """Dependency injection for ScheduleService"""
    return ScheduleService(db)


def resolve_week_key(week_key: Optional[str]) -> str:
    """Normalise a client week key, defaulting to the current week"""
    if not week_key:
        return current_week_key()
    try:
        return normalize_week_key(week_key)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def check_entry_id(entry_id: str) -> str:
    if not validate_uuid(entry_id):
        raise HTTPException(status_code=404, detail="Entry not found")
    return entry_id


@router.get("", response_model=WeekScheduleResponse)
async def get_week_schedule(
    weekKey: Optional[str] = Query(None, description="Any date of the week, MM/DD/YYYY"),
    current_user: UserProfile = Depends(get_current_profile),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Get the current user's entries for a week, grouped by day index"""
    week_key = resolve_week_key(weekKey)
    return {"weekKey": week_key, "schedule": service.get_week_schedule(current_user, week_key)}


@router.get("/overview", response_model=WeekOverviewResponse)
async def get_week_overview(
    weekKey: Optional[str] = Query(None),
    current_user: UserProfile = Depends(get_current_profile),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Week view with day dates, conflict flags and the next free slot per day"""
    return service.get_week_overview(current_user, resolve_week_key(weekKey))


@router.get("/text", response_class=PlainTextResponse)
async def export_week_text(
    weekKey: Optional[str] = Query(None),
    current_user: UserProfile = Depends(get_current_profile),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Plain-text version of the week (private entries left out)"""
    return service.export_text(current_user, resolve_week_key(weekKey))


@router.get("/time-options", response_model=list[str])
async def get_time_options():
    return time_options()


@router.post("", response_model=EntryResponse)
async def create_entry(
    data: EntryCreate,
    current_user: UserProfile = Depends(get_current_profile),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Create a new entry"""
    return entry_to_dict(service.save_entry(data, current_user))


@router.patch("/{entry_id}", response_model=EntryResponse)
async def update_entry(
    data: EntryUpdate,
    entry_id: str = Depends(check_entry_id),
    current_user: UserProfile = Depends(get_current_profile),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Update one or more fields of an entry"""
    return entry_to_dict(service.update_entry(entry_id, data, current_user))


@router.delete("/{entry_id}")
async def delete_entry(
    entry_id: str = Depends(check_entry_id),
    current_user: UserProfile = Depends(get_current_profile),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Delete an entry"""
    return service.delete_entry(entry_id, current_user)
