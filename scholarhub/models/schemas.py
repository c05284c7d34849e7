"""
Pydantic models for records, request and response schemas.
"""
from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


Role = Literal["student", "admin"]


class EntityType(str, Enum):
    """Kind of entity a bookmark points at. Scholarship and university ids never mix."""
    SCHOLARSHIP = "scholarship"
    UNIVERSITY = "university"


# ============================================================================
# RECORDS
# ============================================================================

class User(BaseModel):
    """Session subject. Never mutated once created."""
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    role: Role = "student"


class ScholarshipCreate(BaseModel):
    """Scholarship fields as entered in the admin panel (no id yet)."""
    name: str = Field(min_length=1)
    description: str = ""
    country: str = Field(min_length=1)
    budget: float = Field(ge=0)
    major: str = "Any"
    deadline: date
    url: str = ""
    organization: str = ""


class Scholarship(ScholarshipCreate):
    id: str


class ScholarshipUpdate(BaseModel):
    """Partial update, only the supplied fields change."""
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    country: str | None = Field(default=None, min_length=1)
    budget: float | None = Field(default=None, ge=0)
    major: str | None = None
    deadline: date | None = None
    url: str | None = None
    organization: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UniversityCreate(BaseModel):
    name: str
    country: str
    programs: list[str] = []
    url: str = ""
    logo_url: str = ""


class University(UniversityCreate):
    id: str


class BookmarkCreate(BaseModel):
    user_id: str
    entity_id: str
    entity_type: EntityType


class Bookmark(BookmarkCreate):
    id: str


# ============================================================================
# SEARCH MODELS
# ============================================================================

class SearchFilters(BaseModel):
    """Transient query object. Empty strings and None mean "unset"."""
    country: str = ""
    budget: float | None = Field(default=None, ge=0)
    major: str = ""
    deadline: date | None = None
    query: str = ""

    @field_validator("budget", "deadline", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ScholarshipResult(Scholarship):
    """Scholarship plus the caller's bookmark id for it, if any."""
    bookmark_id: str | None = None


class UniversityResult(University):
    bookmark_id: str | None = None


# ============================================================================
# AUTH MODELS
# ============================================================================

class Credentials(BaseModel):
    """Request model for login and signup."""
    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        value = value.strip()
        if "@" not in value or value.startswith("@") or value.endswith("@"):
            raise ValueError("email must look like name@domain")
        return value


class SessionResponse(BaseModel):
    token: str
    user: User


class LogoutResponse(BaseModel):
    ok: bool = True


# ============================================================================
# BOOKMARK MODELS
# ============================================================================

class BookmarkRequest(BaseModel):
    """Request model for adding or toggling a bookmark for the current user."""
    entity_id: str
    entity_type: EntityType


class BookmarkToggleResponse(BaseModel):
    bookmarked: bool
    bookmark: Bookmark | None = None


class BookmarkRemoveResponse(BaseModel):
    removed: bool


class DashboardResponse(BaseModel):
    """A user's bookmarks with the entities they point at."""
    bookmarks: list[Bookmark]
    scholarships: list[Scholarship]
    universities: list[University]


# ============================================================================
# SUMMARY MODELS
# ============================================================================

class SummaryRequest(BaseModel):
    """Free-text summary request."""
    context: str = Field(min_length=1)
    instruction: str | None = None
    max_length: int | None = Field(default=None, gt=0)


class SummaryResponse(BaseModel):
    summary: str
    entity_id: str | None = None
    entity_type: EntityType | None = None
