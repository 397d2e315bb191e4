"""Profile service - Business logic for user profiles"""

import logging
from typing import Optional

import firebase_admin
from fastapi import HTTPException
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from firebase_admin.exceptions import FirebaseError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import FIREBASE_PROJECT_ID, ROOT_DOMAIN
from ...models import UserProfile
from ...shared.validators import validate_new_password, validate_username
from .repository import ProfileRepository
from .schemas import PasswordChangeRequest, ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


def ensure_firebase_app():
    """Initialize the Firebase Admin SDK once"""
    try:
        return firebase_admin.get_app()
    except ValueError:
        try:
            app = firebase_admin.initialize_app(
                credentials.ApplicationDefault(), {"projectId": FIREBASE_PROJECT_ID}
            )
            logger.info("Firebase Admin initialized with default credentials")
        except Exception:
            app = firebase_admin.initialize_app(options={"projectId": FIREBASE_PROJECT_ID})
            logger.info("Firebase Admin initialized with project ID only")
        return app


def public_url(username: Optional[str]) -> Optional[str]:
    return f"https://{username}.{ROOT_DOMAIN}" if username else None


def profile_to_dict(profile: UserProfile) -> dict:
    return {
        "id": profile.id,
        "username": profile.username,
        "fullName": profile.full_name,
        "avatarUrl": profile.avatar_url,
        "publicUrl": public_url(profile.username),
        "createdAt": profile.created_at,
        "updatedAt": profile.updated_at,
    }


class ProfileService:
    """Service layer for profile business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProfileRepository()

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """Profile of a user, or None for new users (or if the store fails)"""
        try:
            return self.repo.get_profile(self.db, user_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error fetching profile {user_id}: {e}")
            return None

    def check_username_availability(self, username: str, current_user_id: Optional[str] = None) -> bool:
        """Available when nobody holds it, or the only holder is the current user"""
        try:
            owners = self.repo.find_username_owners(self.db, username)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error checking username {username}: {e}")
            return False

        return not owners or (current_user_id is not None and owners[0] == current_user_id)

    def _require_available(self, username: str, user_id: str) -> None:
        if not self.check_username_availability(username, user_id):
            logger.warning(f"⚠️ Username {username} not available for user {user_id}")
            raise HTTPException(status_code=409, detail="Username is not available")

    def create_profile(self, user_id: str, data: ProfileCreate) -> UserProfile:
        logger.info(f"📥 Creating profile for user {user_id}")

        try:
            if self.repo.get_profile(self.db, user_id):
                raise HTTPException(status_code=409, detail="Profile already exists")
            self._require_available(data.username, user_id)

            return self.repo.create_profile(
                self.db,
                user_id,
                username=data.username,
                full_name=data.fullName,
                avatar_url=data.avatarUrl,
            )
        except IntegrityError as e:
            # Username taken between the check and the insert
            self.db.rollback()
            raise HTTPException(status_code=409, detail="Username is not available") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error creating profile {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save profile") from e

    def update_profile(self, user_id: str, data: ProfileUpdate) -> UserProfile:
        try:
            profile = self.repo.get_profile(self.db, user_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error fetching profile {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save profile") from e
        if not profile:
            raise HTTPException(status_code=404, detail="Profile not found")

        updates = {}
        if data.username is not None:
            self._require_available(data.username, user_id)
            updates["username"] = data.username
        if data.fullName is not None:
            updates["full_name"] = data.fullName
        if data.avatarUrl is not None:
            updates["avatar_url"] = data.avatarUrl

        try:
            return self.repo.update_profile(self.db, profile, **updates)
        except IntegrityError as e:
            self.db.rollback()
            raise HTTPException(status_code=409, detail="Username is not available") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error updating profile {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to save profile") from e

    def change_password(self, user_id: str, data: PasswordChangeRequest) -> dict:
        """Set a new password through the auth provider"""
        try:
            password = validate_new_password(data.newPassword, data.confirmPassword)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        ensure_firebase_app()
        try:
            firebase_auth.update_user(user_id, password=password)
            logger.info(f"Password updated for user: {user_id}")
        except (FirebaseError, ValueError) as e:
            logger.error(f"Firebase password update failed for {user_id}: {e}")
            raise HTTPException(
                status_code=500, detail="Failed to update password. Please try again."
            ) from e

        return {"message": "Password updated", "success": True}


def normalize_requested_username(username: str) -> str:
    """Validate a username query value; 400 with the rule it breaks"""
    try:
        return validate_username(username)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
