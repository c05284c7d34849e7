"""
Shared dependencies: stores, Gemini client, sessions.
"""
import logging
from dataclasses import dataclass, field

from fastapi import Depends, Header, Request
from google import genai
from supabase import Client, create_client

from .config import (
    BOOKMARKS_TABLE,
    GEMINI_API_KEY,
    SCHOLARSHIPS_TABLE,
    STORE_BACKEND,
    SUPABASE_SERVICE_KEY,
    SUPABASE_URL,
    UNIVERSITIES_TABLE,
)
from .models.schemas import Bookmark, Scholarship, University, User
from .seed import SEED_SCHOLARSHIPS, SEED_UNIVERSITIES
from .services.auth import AuthGate, Session, SessionRegistry, require_role, require_user
from .services.bookmarks import BookmarkManager
from .services.store import EntityStore, InMemoryStore, SupabaseStore

logger = logging.getLogger(__name__)

# Initialize Gemini client
logger.debug("Initializing Gemini client...")
try:
    gemini_client = genai.Client(api_key=GEMINI_API_KEY)
    logger.debug("Gemini client initialized successfully")
except Exception as e:
    logger.error(f"Failed to initialize Gemini client: {e}")
    gemini_client = None


def get_supabase() -> Client:
    """Create and return a Supabase client instance."""
    logger.debug("Creating Supabase client...")
    client = create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)
    logger.debug("Supabase client created")
    return client


@dataclass
class AppState:
    """Everything the request handlers share. One per application."""
    scholarships: EntityStore[Scholarship]
    universities: EntityStore[University]
    bookmarks: BookmarkManager
    auth: AuthGate = field(default_factory=AuthGate)
    sessions: SessionRegistry = field(default_factory=SessionRegistry)


def build_state(backend: str = STORE_BACKEND) -> AppState:
    """Wire the stores for the configured backend."""
    logger.debug(f"Building application state with backend={backend}")

    if backend == "supabase":
        supabase = get_supabase()
        return AppState(
            scholarships=SupabaseStore(supabase, SCHOLARSHIPS_TABLE, Scholarship),
            universities=SupabaseStore(supabase, UNIVERSITIES_TABLE, University),
            bookmarks=BookmarkManager(SupabaseStore(supabase, BOOKMARKS_TABLE, Bookmark)),
        )

    if backend != "memory":
        raise ValueError(f"Unknown STORE_BACKEND: {backend}")

    return AppState(
        scholarships=InMemoryStore(Scholarship, "s", SEED_SCHOLARSHIPS),
        universities=InMemoryStore(University, "u", SEED_UNIVERSITIES),
        bookmarks=BookmarkManager(InMemoryStore(Bookmark, "b")),
    )


def get_state(request: Request) -> AppState:
    return request.app.state.scholarhub


def get_gemini_client():
    return gemini_client


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        logger.debug("Authorization header is not a bearer token")
        return None
    return token.strip()


def get_session(
    authorization: str = Header(None),
    state: AppState = Depends(get_state),
) -> Session:
    """Resolve the bearer token in the Authorization header to a session."""
    token = bearer_token(authorization)
    session = state.sessions.get(token)
    if token and not session.is_authenticated:
        logger.debug("Unknown or expired session token, treating as anonymous")
    return session


def current_user(session: Session = Depends(get_session)) -> User:
    return require_user(session)


def admin_user(session: Session = Depends(get_session)) -> User:
    return require_role(session, "admin")
