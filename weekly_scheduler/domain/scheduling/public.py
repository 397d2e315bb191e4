"""Read-time transforms for the public schedule view"""

from collections.abc import Iterable
from typing import Optional

from ...models import ScheduleEntry

BUSY_LABEL = "Busy"


def entry_to_dict(entry: ScheduleEntry, description: Optional[str] = None) -> dict:
    return {
        "id": entry.id,
        "startTime": entry.start_time,
        "endTime": entry.end_time or "",
        "description": entry.description if description is None else description,
        "isPrivate": bool(entry.is_private),
    }


def redact_entry(entry: ScheduleEntry) -> dict:
    """Public view of an entry. Private descriptions become "Busy"; times stay visible."""
    if entry.is_private:
        return entry_to_dict(entry, description=BUSY_LABEL)
    return entry_to_dict(entry)


def group_by_day(entries: Iterable[ScheduleEntry], transform=entry_to_dict) -> dict[int, list[dict]]:
    grouped: dict[int, list[dict]] = {}
    for entry in entries:
        grouped.setdefault(entry.day_index, []).append(transform(entry))
    return grouped


def build_public_schedule(entries: Iterable[ScheduleEntry]) -> dict[int, list[dict]]:
    """Group redacted entries by day index"""
    return group_by_day(entries, transform=redact_entry)
