"""Profile repository - Database operations for user profiles"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import UserProfile


class ProfileRepository:
    """Repository for profile database operations"""

    @staticmethod
    def get_profile(db: Session, user_id: str) -> Optional[UserProfile]:
        return db.query(UserProfile).filter(UserProfile.id == user_id).first()

    @staticmethod
    def get_profile_by_username(db: Session, username: str) -> Optional[UserProfile]:
        """Case-insensitive username lookup"""
        return (
            db.query(UserProfile)
            .filter(func.lower(UserProfile.username) == username.lower())
            .first()
        )

    @staticmethod
    def find_username_owners(db: Session, username: str, limit: int = 1) -> list[str]:
        """IDs of profiles holding this username (any letter case)"""
        rows = (
            db.query(UserProfile.id)
            .filter(func.lower(UserProfile.username) == username.lower())
            .limit(limit)
            .all()
        )
        return [row.id for row in rows]

    @staticmethod
    def create_profile(db: Session, user_id: str, **profile_data) -> UserProfile:
        profile = UserProfile(id=user_id, **profile_data)
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def update_profile(db: Session, profile: UserProfile, **updates) -> UserProfile:
        """Update a profile with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(profile, key):
                setattr(profile, key, value)

        db.commit()
        db.refresh(profile)
        return profile
