"""Profile router - FastAPI endpoints for the caller's profile"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import get_current_identity
from ...database import get_db
from .schemas import (
    PasswordChangeRequest,
    ProfileCreate,
    ProfileResponse,
    ProfileStatusResponse,
    ProfileUpdate,
    UsernameAvailabilityResponse,
)
from .service import ProfileService, normalize_requested_username, profile_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["Profiles"])


def get_profile_service(db: Session = Depends(get_db)) -> ProfileService:
    """Dependency injection for ProfileService"""
    return ProfileService(db)


@router.get("/me", response_model=ProfileStatusResponse)
async def get_my_profile(
    identity: dict = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    """Current profile (null for new users) and whether it is complete"""
    profile = service.get_profile(identity["uid"])
    return {
        "profile": profile_to_dict(profile) if profile else None,
        "isComplete": bool(profile and profile.is_complete),
    }


@router.post("/me", response_model=ProfileResponse)
async def create_my_profile(
    data: ProfileCreate,
    identity: dict = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    """Create the profile for the authenticated user"""
    return profile_to_dict(service.create_profile(identity["uid"], data))


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    data: ProfileUpdate,
    identity: dict = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    """Update name, username or avatar URL"""
    return profile_to_dict(service.update_profile(identity["uid"], data))


@router.get("/username-availability", response_model=UsernameAvailabilityResponse)
async def check_username_availability(
    username: str = Query(...),
    identity: dict = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    """Whether the username is free (or already the caller's)"""
    username = normalize_requested_username(username)
    return {
        "username": username,
        "available": service.check_username_availability(username, identity["uid"]),
    }


@router.post("/me/password")
async def change_my_password(
    data: PasswordChangeRequest,
    identity: dict = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
):
    """Change the password of the authenticated user"""
    return service.change_password(identity["uid"], data)
