"""Week key helpers. A week is identified by its Monday formatted MM/DD/YYYY."""

from datetime import date, datetime, timedelta
from typing import Optional

WEEK_KEY_FORMAT = "%m/%d/%Y"
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def get_monday(day: date) -> date:
    return day - timedelta(days=day.weekday())


def week_key(day: date) -> str:
    """Canonical key for the week containing `day`"""
    return get_monday(day).strftime(WEEK_KEY_FORMAT)


def parse_week_key(key: str) -> date:
    """Parse an MM/DD/YYYY key. Raises ValueError on malformed input."""
    try:
        return datetime.strptime(key.strip(), WEEK_KEY_FORMAT).date()
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid week key '{key}', expected MM/DD/YYYY") from e


def normalize_week_key(key: str) -> str:
    """Map any MM/DD/YYYY date to the key of the week it falls in"""
    return week_key(parse_week_key(key))


def current_week_key(today: Optional[date] = None) -> str:
    return week_key(today or date.today())


def week_dates(day: date) -> list[date]:
    """Monday..Sunday of the week containing `day`"""
    monday = get_monday(day)
    return [monday + timedelta(days=i) for i in range(7)]


def shift_week(day: date, direction: int) -> date:
    """Move `direction` whole weeks forward (positive) or back (negative)"""
    return day + timedelta(weeks=direction)


def adjacent_week_keys(key: str) -> tuple[str, str]:
    """(previous, next) week keys"""
    monday = parse_week_key(key)
    return week_key(shift_week(monday, -1)), week_key(shift_week(monday, 1))
