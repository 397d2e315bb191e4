"""
Scheduling Domain

Weekly schedules of time-blocked entries, keyed by (user, week, day).

Structure:
- weeks.py            # Week keys (Monday, MM/DD/YYYY) and navigation
- time_calculator.py  # Time parsing, conflict detection, next free slot
- public.py           # Redaction of private entries for public viewers
- schemas.py          # Entry and week schemas
- repository.py       # Entry database queries
- service.py          # Owner CRUD, week overview, text export
- router.py           # /schedules endpoints (authenticated)
- public_router.py    # /api/public-schedule and /public/{username}
"""

from .public_router import router as public_router
from .router import router

__all__ = ["router", "public_router"]
