"""Profiles Domain - user profiles, username rules and password changes"""

from .router import router

__all__ = ["router"]
