"""
Public schedule routes.

No authentication: anyone may read a user's week by username. Private entries
are redacted to "Busy" before leaving the service.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.validators import is_valid_public_username
from ..profiles.repository import ProfileRepository
from .public import build_public_schedule
from .repository import ScheduleRepository
from .schemas import PublicPageResponse, PublicScheduleResponse
from .weeks import current_week_key, normalize_week_key, parse_week_key, week_dates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Public Schedule"])


def load_public_schedule(db: Session, username: str, week_key: str) -> dict:
    """Redacted week of a user. 404 for unknown users, 500 if the store fails."""
    if not is_valid_public_username(username):
        raise HTTPException(status_code=404, detail="User not found")

    try:
        profile = ProfileRepository.get_profile_by_username(db, username)
        if not profile:
            raise HTTPException(status_code=404, detail="User not found")
        entries = ScheduleRepository.get_week_entries(db, profile.id, week_key)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error fetching public schedule for {username}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch schedule") from e

    return build_public_schedule(entries)


@router.get("/api/public-schedule", response_model=PublicScheduleResponse)
async def get_public_schedule(
    username: Optional[str] = Query(None),
    weekKey: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Public, redacted schedule of a user for one week"""
    if not username or not weekKey:
        raise HTTPException(status_code=400, detail="Username and weekKey are required")

    try:
        week_key = normalize_week_key(weekKey)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    schedule = load_public_schedule(db, username, week_key)
    return {"schedule": schedule, "username": username}


@router.get("/public/{username}", response_model=PublicPageResponse)
async def get_public_page(
    username: str,
    weekKey: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Public schedule page data; subdomain requests are rewritten here"""
    if not is_valid_public_username(username):
        raise HTTPException(status_code=404, detail="User not found")

    try:
        week_key = normalize_week_key(weekKey) if weekKey else current_week_key(date.today())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    schedule = load_public_schedule(db, username, week_key)
    return {
        "username": username,
        "weekKey": week_key,
        "weekDates": week_dates(parse_week_key(week_key)),
        "schedule": schedule,
    }
