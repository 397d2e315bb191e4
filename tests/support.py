import unittest
import uuid
from typing import Optional

from fastapi.testclient import TestClient

from weekly_scheduler.auth import get_current_identity
from weekly_scheduler.database import Base, SessionLocal, engine
from weekly_scheduler.main import app
from weekly_scheduler.models import ScheduleEntry, UserProfile


def make_entry(start: str, end: Optional[str] = None, entry_id: Optional[str] = None, **kw) -> ScheduleEntry:
    """Unsaved entry for pure calculations"""
    return ScheduleEntry(
        id=entry_id or str(uuid.uuid4()),
        start_time=start,
        end_time=end,
        description=kw.get("description", ""),
        is_private=kw.get("is_private", False),
        day_index=kw.get("day_index", 0),
        week_key=kw.get("week_key", "01/01/2024"),
    )


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database and an authenticated client per test"""

    uid = "user-alice"

    def setUp(self) -> None:
        Base.metadata.create_all(bind=engine)
        self.db = SessionLocal()
        self.identity = {"uid": self.uid, "email": "alice@example.com"}
        app.dependency_overrides[get_current_identity] = lambda: self.identity
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def login_as(self, uid: str) -> None:
        self.identity = {"uid": uid, "email": f"{uid}@example.com"}

    def add_profile(self, uid: str, username: Optional[str], full_name: Optional[str] = "Test User") -> UserProfile:
        profile = UserProfile(id=uid, username=username, full_name=full_name)
        self.db.add(profile)
        self.db.commit()
        return profile

    def add_entry(self, uid: str, week_key: str, day_index: int, start: str, end: Optional[str] = None,
                  description: str = "", is_private: bool = False) -> ScheduleEntry:
        entry = ScheduleEntry(
            user_id=uid,
            week_key=week_key,
            day_index=day_index,
            start_time=start,
            end_time=end,
            description=description,
            is_private=is_private,
        )
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry
