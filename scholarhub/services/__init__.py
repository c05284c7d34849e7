"""
Services package initialization.
"""
from .store import EntityStore, InMemoryStore, SupabaseStore
from .search import search, search_scholarships, search_universities
from .bookmarks import BookmarkManager, resolve_bookmarks
from .auth import (
    AuthGate,
    Session,
    SessionRegistry,
    require_role,
    require_user,
    serialize_user,
    deserialize_user,
)
from .summary import summarize, scholarship_context, university_context

__all__ = [
    "EntityStore",
    "InMemoryStore",
    "SupabaseStore",
    "search",
    "search_scholarships",
    "search_universities",
    "BookmarkManager",
    "resolve_bookmarks",
    "AuthGate",
    "Session",
    "SessionRegistry",
    "require_role",
    "require_user",
    "serialize_user",
    "deserialize_user",
    "summarize",
    "scholarship_context",
    "university_context",
]
