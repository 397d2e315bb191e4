"""Schedule repository - Database operations for schedule entries"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ScheduleEntry


class ScheduleRepository:
    """Repository for schedule entry database operations, always scoped to one user"""

    @staticmethod
    def get_week_entries(db: Session, user_id: str, week_key: str) -> list[ScheduleEntry]:
        """Get all entries of a user's week, ordered by start time"""
        return (
            db.query(ScheduleEntry)
            .filter(ScheduleEntry.user_id == user_id, ScheduleEntry.week_key == week_key)
            .order_by(ScheduleEntry.start_time.asc())
            .all()
        )

    @staticmethod
    def get_day_entries(
        db: Session, user_id: str, week_key: str, day_index: int
    ) -> list[ScheduleEntry]:
        return (
            db.query(ScheduleEntry)
            .filter(
                ScheduleEntry.user_id == user_id,
                ScheduleEntry.week_key == week_key,
                ScheduleEntry.day_index == day_index,
            )
            .all()
        )

    @staticmethod
    def get_entry(db: Session, entry_id: str, user_id: str) -> Optional[ScheduleEntry]:
        """Get a specific entry owned by the user"""
        return (
            db.query(ScheduleEntry)
            .filter(ScheduleEntry.id == entry_id, ScheduleEntry.user_id == user_id)
            .first()
        )

    @staticmethod
    def create_entry(db: Session, user_id: str, **entry_data) -> ScheduleEntry:
        """Create a new entry"""
        entry = ScheduleEntry(user_id=user_id, **entry_data)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    @staticmethod
    def update_entry(db: Session, entry: ScheduleEntry, **updates) -> ScheduleEntry:
        """Update an entry with the provided fields (None is a valid end_time)"""
        for key, value in updates.items():
            if hasattr(entry, key):
                setattr(entry, key, value)

        db.commit()
        db.refresh(entry)
        return entry

    @staticmethod
    def delete_entry(db: Session, entry: ScheduleEntry) -> None:
        """Delete an entry"""
        db.delete(entry)
        db.commit()
