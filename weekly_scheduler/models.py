import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_entry_id():
    """Generate a unique ID for a schedule entry"""
    return str(uuid.uuid4())


class UserProfile(Base):
    __tablename__ = "user_profiles"

    # Same identifier as the auth provider's user (Firebase UID)
    id = Column(String(128), primary_key=True, index=True)
    username = Column(String(30), unique=True, index=True, nullable=True)  # Stored lowercase
    full_name = Column(String(255), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    schedule_entries = relationship(
        "ScheduleEntry", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def is_complete(self) -> bool:
        """A profile needs both a name and a username before the schedule is usable"""
        return bool(self.full_name and self.full_name.strip() and self.username)


class ScheduleEntry(Base):
    __tablename__ = "schedule_entries"

    id = Column(String(36), primary_key=True, default=generate_entry_id)
    user_id = Column(String(128), ForeignKey("user_profiles.id"), index=True, nullable=False)
    week_key = Column(String(10), index=True, nullable=False)  # Monday of the week, MM/DD/YYYY
    day_index = Column(Integer, nullable=False)  # 0=Monday .. 6=Sunday
    start_time = Column(String(5), nullable=False)  # HH:MM, 24h
    end_time = Column(String(5), nullable=True)  # NULL = open-ended
    description = Column(Text, default="", nullable=False)
    is_private = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("UserProfile", back_populates="schedule_entries")
