"""
Auth gate: credential checks, sessions and the user persistence boundary.

A Session is either anonymous (user is None) or authenticated. Sessions are
passed explicitly into every operation that needs one.
"""
import hashlib
import json
import logging
import secrets
from dataclasses import dataclass

from pydantic import ValidationError

from ..errors import (
    AlreadyExistsError,
    AuthenticationRequiredError,
    FormValidationError,
    InvalidCredentialsError,
    PermissionDeniedError,
)
from ..models.schemas import User
from ..seed import GOOGLE_ACCOUNT_EMAIL, SEED_ACCOUNTS

logger = logging.getLogger(__name__)

_HASH_ITERATIONS = 100_000


def _hash_password(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _HASH_ITERATIONS)


@dataclass(frozen=True)
class Session:
    user: User | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


ANONYMOUS = Session()


@dataclass
class _Account:
    user: User
    salt: bytes
    password_hash: bytes

    def check(self, password: str) -> bool:
        return secrets.compare_digest(self.password_hash, _hash_password(password, self.salt))


class AuthGate:
    """Fixed credential table plus accounts created by signup."""

    def __init__(self, accounts=SEED_ACCOUNTS, google_email: str = GOOGLE_ACCOUNT_EMAIL):
        self._accounts: dict[str, _Account] = {}
        self._signups = 0
        self._google_email = google_email
        for user_id, email, role, password in accounts:
            self._register(User(id=user_id, email=email, role=role), password)
        logger.debug(f"Auth gate ready with {len(self._accounts)} accounts")

    def _register(self, user: User, password: str) -> User:
        salt = secrets.token_bytes(16)
        self._accounts[user.email] = _Account(user, salt, _hash_password(password, salt))
        return user

    def _new_user_id(self) -> str:
        taken = {a.user.id for a in self._accounts.values()}
        while True:
            self._signups += 1
            candidate = f"user-{self._signups}"
            if candidate not in taken:
                return candidate

    def login(self, email: str, password: str) -> Session:
        account = self._accounts.get(email)
        if account is None or not account.check(password):
            logger.info(f"Login failed for {email}")
            raise InvalidCredentialsError("Invalid email or password")
        logger.info(f"Login succeeded for {email} (role={account.user.role})")
        return Session(user=account.user)

    def signup(self, email: str, password: str) -> Session:
        if email in self._accounts:
            logger.info(f"Signup rejected, {email} already registered")
            raise AlreadyExistsError(f"An account for {email} already exists")
        user = self._register(User(id=self._new_user_id(), email=email, role="student"), password)
        logger.info(f"Signed up {email} as {user.id}")
        return Session(user=user)

    def login_with_google(self) -> Session:
        """Stand-in for a federated sign-in; always the same seeded profile."""
        account = self._accounts.get(self._google_email)
        if account is None:
            raise InvalidCredentialsError("Federated account is not available")
        logger.info(f"Federated login resolved to {account.user.email}")
        return Session(user=account.user)

    def logout(self, session: Session) -> Session:
        if session.is_authenticated:
            logger.info(f"Logout for {session.user.email}")
        return ANONYMOUS


def require_user(session: Session) -> User:
    if session.user is None:
        raise AuthenticationRequiredError("Login required")
    return session.user


def require_role(session: Session, *roles: str) -> User:
    user = require_user(session)
    if user.role not in roles:
        logger.warning(f"User {user.id} with role {user.role} denied, needs one of {roles}")
        raise PermissionDeniedError(f"Requires role: {', '.join(roles)}")
    return user


class SessionRegistry:
    """
    Opaque bearer tokens for HTTP clients.

    Each user holds at most one live token; opening a new session closes the
    previous one.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}
        self._tokens_by_user: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, session: Session) -> Session:
        user = require_user(session)
        previous = self._tokens_by_user.get(user.id)
        if previous:
            logger.debug(f"Replacing previous session for {user.id}")
            self._sessions.pop(previous, None)

        token = secrets.token_urlsafe(32)
        opened = Session(user=user, token=token)
        self._sessions[token] = opened
        self._tokens_by_user[user.id] = token
        return opened

    def get(self, token: str | None) -> Session:
        if not token:
            return ANONYMOUS
        return self._sessions.get(token, ANONYMOUS)

    def close(self, token: str | None) -> None:
        if not token:
            return
        session = self._sessions.pop(token, None)
        if session is not None and self._tokens_by_user.get(session.user.id) == token:
            del self._tokens_by_user[session.user.id]


# ============================================================================
# SESSION PERSISTENCE BOUNDARY
# ============================================================================

def serialize_user(user: User) -> bytes:
    return user.model_dump_json().encode("utf-8")


def deserialize_user(data: bytes) -> User:
    try:
        return User.model_validate(json.loads(data.decode("utf-8")))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Could not restore stored user: {e}")
        raise FormValidationError("Stored user record is malformed") from e
