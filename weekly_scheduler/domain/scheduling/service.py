"""Schedule service - Business logic for schedule entries"""

import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models import ScheduleEntry, UserProfile
from .public import entry_to_dict, group_by_day
from .repository import ScheduleRepository
from .schemas import EntryCreate, EntryUpdate
from .time_calculator import get_next_available_time, has_conflict
from .weeks import DAY_NAMES, adjacent_week_keys, parse_week_key, week_dates

logger = logging.getLogger(__name__)


def _sorted_by_start(entries: list[ScheduleEntry]) -> list[ScheduleEntry]:
    return sorted(entries, key=lambda e: e.start_time)


class ScheduleService:
    """Service layer for schedule business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScheduleRepository()

    def _week_entries(self, user: UserProfile, week_key: str) -> list[ScheduleEntry]:
        """Fetch a week; a store failure degrades to an empty week"""
        try:
            return self.repo.get_week_entries(self.db, user.id, week_key)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error fetching schedule for user {user.id}, week {week_key}: {e}")
            return []

    def get_week_schedule(self, user: UserProfile, week_key: str) -> dict[int, list[dict]]:
        """Entries of a week grouped by day index"""
        return group_by_day(self._week_entries(user, week_key))

    def get_week_overview(self, user: UserProfile, week_key: str) -> dict:
        """Per-day view with conflict flags and the suggested next free slot"""
        entries = self._week_entries(user, week_key)
        by_day: dict[int, list[ScheduleEntry]] = {}
        for entry in entries:
            by_day.setdefault(entry.day_index, []).append(entry)

        days = []
        for day_index, day_date in enumerate(week_dates(parse_week_key(week_key))):
            day_entries = by_day.get(day_index, [])
            days.append(
                {
                    "dayIndex": day_index,
                    "dayName": DAY_NAMES[day_index],
                    "date": day_date,
                    "entries": [
                        {**entry_to_dict(e), "hasConflict": has_conflict(e, day_entries)}
                        for e in _sorted_by_start(day_entries)
                    ],
                    "nextAvailableTime": get_next_available_time(day_entries),
                }
            )

        previous_key, next_key = adjacent_week_keys(week_key)
        return {
            "weekKey": week_key,
            "previousWeekKey": previous_key,
            "nextWeekKey": next_key,
            "days": days,
        }

    def get_entry(self, entry_id: str, user: UserProfile) -> ScheduleEntry:
        entry = self.repo.get_entry(self.db, entry_id, user.id)
        if not entry:
            raise HTTPException(status_code=404, detail="Entry not found")
        return entry

    def save_entry(self, data: EntryCreate, user: UserProfile) -> ScheduleEntry:
        """Create an entry; without a start time it goes into the day's next free slot"""
        logger.info(f"📥 Creating entry for user {user.id} on {data.weekKey} day {data.dayIndex}")

        try:
            start_time = data.startTime
            if not start_time:
                day_entries = self.repo.get_day_entries(
                    self.db, user.id, data.weekKey, data.dayIndex
                )
                start_time = get_next_available_time(day_entries)

            if data.endTime and data.endTime <= start_time:
                raise HTTPException(status_code=400, detail="End time must be after start time")

            return self.repo.create_entry(
                self.db,
                user.id,
                week_key=data.weekKey,
                day_index=data.dayIndex,
                start_time=start_time,
                end_time=data.endTime,
                description=data.description,
                is_private=data.isPrivate,
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error saving entry for user {user.id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save entry") from e

    def update_entry(self, entry_id: str, data: EntryUpdate, user: UserProfile) -> ScheduleEntry:
        """Apply only the fields the client sent. Last write wins."""
        entry = self.get_entry(entry_id, user)
        fields = data.model_fields_set

        updates = {}
        if "startTime" in fields and data.startTime is not None:
            updates["start_time"] = data.startTime
        if "endTime" in fields:
            updates["end_time"] = data.endTime or None
        if "description" in fields and data.description is not None:
            updates["description"] = data.description
        if "isPrivate" in fields and data.isPrivate is not None:
            updates["is_private"] = data.isPrivate

        start_time = updates.get("start_time", entry.start_time)
        end_time = updates.get("end_time", entry.end_time)
        if end_time and end_time <= start_time:
            raise HTTPException(status_code=400, detail="End time must be after start time")

        try:
            return self.repo.update_entry(self.db, entry, **updates)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error updating entry {entry_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update entry") from e

    def delete_entry(self, entry_id: str, user: UserProfile) -> dict:
        entry = self.get_entry(entry_id, user)
        try:
            self.repo.delete_entry(self.db, entry)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error deleting entry {entry_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete entry") from e
        return {"message": "Entry deleted"}

    def export_text(self, user: UserProfile, week_key: str) -> str:
        """Plain-text version of the week listing only public entries"""
        return render_week_text(week_key, self._week_entries(user, week_key))


def render_week_text(week_key: str, entries: list[ScheduleEntry]) -> str:
    dates = week_dates(parse_week_key(week_key))
    by_day: dict[int, list[ScheduleEntry]] = {}
    for entry in entries:
        by_day.setdefault(entry.day_index, []).append(entry)

    fmt = "%m/%d/%Y"
    lines = [f"Weekly Schedule {dates[0].strftime(fmt)} - {dates[6].strftime(fmt)}", ""]
    for day_index, day_date in enumerate(dates):
        lines.append(f"{DAY_NAMES[day_index]} {day_date.month}/{day_date.day}")

        public_entries = [e for e in by_day.get(day_index, []) if not e.is_private]
        if not public_entries:
            lines.append("No public plans.")
        for entry in _sorted_by_start(public_entries):
            time_range = (
                f"{entry.start_time} - {entry.end_time}" if entry.end_time else entry.start_time
            )
            lines.append(f"{time_range} {entry.description}")
        lines.append("")

    return "\n".join(lines) + "\n"
