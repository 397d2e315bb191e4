"""Time parsing, conflict detection and free-slot suggestion for a single day.

Entries are any objects exposing ``id``, ``start_time`` and ``end_time``
(``HH:MM`` strings, end may be empty/None for an open-ended entry).
"""

from typing import Optional, Sequence

from ...shared.validators import validate_time_string

MINUTES_PER_DAY = 24 * 60
DEFAULT_START_TIME = "09:00"
MIN_GAP_MINUTES = 15
OPEN_ENDED_DURATION = 60


def time_to_minutes(value: str) -> int:
    """Convert HH:MM to minutes since midnight. Raises ValueError on malformed input."""
    validate_time_string(value)
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def _end_minutes(end_time: Optional[str]) -> Optional[int]:
    return time_to_minutes(end_time) if end_time else None


def entries_conflict(entry, other) -> bool:
    """Pairwise overlap test. A missing end time counts as still ongoing."""
    current_start = time_to_minutes(entry.start_time)
    current_end = _end_minutes(entry.end_time)
    other_start = time_to_minutes(other.start_time)
    other_end = _end_minutes(other.end_time)

    if current_start == other_start:
        return True

    if other_end is not None and other_start < current_start < other_end:
        return True

    if current_end is not None and current_start < other_start < current_end:
        return True

    if current_end is not None and other_end is not None:
        return current_start < other_end and current_end > other_start

    return False


def has_conflict(entry, day_entries: Sequence) -> bool:
    """True when the entry overlaps any other entry of the same day"""
    return any(
        entries_conflict(entry, other) for other in day_entries if other.id != entry.id
    )


def get_next_available_time(day_entries: Sequence) -> str:
    """
    Suggest a start time for a new entry.

    Open-ended entries are treated as lasting one hour here. Returns the end
    of the first busy slot followed by a gap of at least 15 minutes, else the
    end of the last slot, falling back to 09:00 for an empty day or when the
    last slot runs past midnight.
    """
    if not day_entries:
        return DEFAULT_START_TIME

    busy_slots = []
    for entry in day_entries:
        start = time_to_minutes(entry.start_time)
        end = _end_minutes(entry.end_time)
        busy_slots.append((start, end if end is not None else start + OPEN_ENDED_DURATION))
    busy_slots.sort(key=lambda slot: slot[0])

    for (_, gap_start), (gap_end, _) in zip(busy_slots, busy_slots[1:]):
        if gap_end - gap_start >= MIN_GAP_MINUTES:
            return minutes_to_time(gap_start)

    next_time = busy_slots[-1][1]
    if next_time >= MINUTES_PER_DAY:
        return DEFAULT_START_TIME

    return minutes_to_time(next_time)


def time_options(step: int = MIN_GAP_MINUTES) -> list[str]:
    """All selectable times of a day, in `step` minute increments"""
    return [minutes_to_time(m) for m in range(0, MINUTES_PER_DAY, step)]
