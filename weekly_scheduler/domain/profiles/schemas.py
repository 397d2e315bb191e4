"""Profile domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_username


def _clean_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Name is required")
    return v


class ProfileCreate(BaseModel):
    """Schema for completing a new profile"""

    username: str
    fullName: str
    avatarUrl: Optional[str] = None

    @field_validator("username")
    @classmethod
    def validate_username_field(cls, v):
        return validate_username(v)

    @field_validator("fullName")
    @classmethod
    def validate_full_name(cls, v):
        return _clean_name(v)


class ProfileUpdate(BaseModel):
    """Schema for updating an existing profile"""

    username: Optional[str] = None
    fullName: Optional[str] = None
    avatarUrl: Optional[str] = None

    @field_validator("username")
    @classmethod
    def validate_username_field(cls, v):
        if v is None:
            return v
        return validate_username(v)

    @field_validator("fullName")
    @classmethod
    def validate_full_name(cls, v):
        return _clean_name(v)


class ProfileResponse(BaseModel):
    id: str
    username: Optional[str]
    fullName: Optional[str]
    avatarUrl: Optional[str]
    publicUrl: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ProfileStatusResponse(BaseModel):
    profile: Optional[ProfileResponse]
    isComplete: bool


class UsernameAvailabilityResponse(BaseModel):
    username: str
    available: bool


class PasswordChangeRequest(BaseModel):
    newPassword: str
    confirmPassword: Optional[str] = None
