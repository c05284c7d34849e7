"""
Models package initialization.
"""
from .schemas import (
    # Records
    Role,
    EntityType,
    User,
    Scholarship,
    ScholarshipCreate,
    ScholarshipUpdate,
    University,
    UniversityCreate,
    Bookmark,
    BookmarkCreate,
    # Search models
    SearchFilters,
    ScholarshipResult,
    UniversityResult,
    # Auth models
    Credentials,
    SessionResponse,
    LogoutResponse,
    # Bookmark models
    BookmarkRequest,
    BookmarkToggleResponse,
    BookmarkRemoveResponse,
    DashboardResponse,
    # Summary models
    SummaryRequest,
    SummaryResponse,
)

__all__ = [
    "Role",
    "EntityType",
    "User",
    "Scholarship",
    "ScholarshipCreate",
    "ScholarshipUpdate",
    "University",
    "UniversityCreate",
    "Bookmark",
    "BookmarkCreate",
    "SearchFilters",
    "ScholarshipResult",
    "UniversityResult",
    "Credentials",
    "SessionResponse",
    "LogoutResponse",
    "BookmarkRequest",
    "BookmarkToggleResponse",
    "BookmarkRemoveResponse",
    "DashboardResponse",
    "SummaryRequest",
    "SummaryResponse",
]
