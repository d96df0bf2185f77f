"""
Session Store Service - Intake session repository with in-memory and Redis backends.

Sessions are created lazily on the first message for a handle and live
until the process exits (memory) or the key is removed (Redis). There is
no expiry and no protection against two requests racing on one session:
the last save wins.
"""
import json
from typing import Dict, Optional
from abc import ABC, abstractmethod

from claimgenie.core.config import settings
from claimgenie.core.logging import logger
from claimgenie.orchestration.intake.state import (
    IntakeSession,
    create_initial_session,
    reset_session,
)


class SessionStore(ABC):
    """Abstract base class for intake session storage."""

    @abstractmethod
    def get(self, session_id: str) -> Optional[IntakeSession]:
        """Get a session by ID."""
        pass

    @abstractmethod
    def save(self, session: IntakeSession) -> None:
        """Persist a session under its own ID."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Delete a session."""
        pass

    @abstractmethod
    def exists(self, session_id: str) -> bool:
        """Check if a session exists."""
        pass

    def create(self, session_id: Optional[str] = None) -> IntakeSession:
        """Create and store a new session, minting an ID when none is given."""
        session = create_initial_session(session_id)
        self.save(session)
        logger.info(f"Intake session created: {session['session_id']}")
        return session

    def reset(self, session_id: str) -> IntakeSession:
        """Reset a session to its initial values, creating it if unknown."""
        session = self.get(session_id)
        if session is None:
            return self.create(session_id)
        reset_session(session)
        self.save(session)
        return session


class InMemorySessionStore(SessionStore):
    """In-memory session store, the default for a single process."""

    def __init__(self):
        self._sessions: Dict[str, IntakeSession] = {}

    def get(self, session_id: str) -> Optional[IntakeSession]:
        return self._sessions.get(session_id)

    def save(self, session: IntakeSession) -> None:
        self._sessions[session["session_id"]] = session

    def delete(self, session_id: str) -> bool:
        if session_id in self._sessions:
            del self._sessions[session_id]
            return True
        return False

    def exists(self, session_id: str) -> bool:
        return session_id in self._sessions

    def count(self) -> int:
        """Get the number of sessions."""
        return len(self._sessions)


class RedisSessionStore(SessionStore):
    """Redis-backed session store for multi-process deployments."""

    def __init__(self, redis_url: str):
        import redis
        self._redis = redis.from_url(redis_url, decode_responses=True)
        self._prefix = "claimgenie:session:"

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    def get(self, session_id: str) -> Optional[IntakeSession]:
        data = self._redis.get(self._key(session_id))
        if data:
            return json.loads(data)
        return None

    def save(self, session: IntakeSession) -> None:
        self._redis.set(
            self._key(session["session_id"]),
            json.dumps(session, default=str),
        )

    def delete(self, session_id: str) -> bool:
        return self._redis.delete(self._key(session_id)) > 0

    def exists(self, session_id: str) -> bool:
        return self._redis.exists(self._key(session_id)) > 0


# Singleton session store instance
_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get the session store instance (creates if needed)."""
    global _session_store

    if _session_store is not None:
        return _session_store

    if settings.SESSION_BACKEND == "redis":
        try:
            _session_store = RedisSessionStore(settings.REDIS_URL)
            _session_store._redis.ping()
            logger.info("Using Redis session store")
        except Exception as e:
            logger.warning(f"Failed to connect to Redis, using in-memory store: {e}")
            _session_store = InMemorySessionStore()
    else:
        logger.info("Using in-memory session store")
        _session_store = InMemorySessionStore()

    return _session_store
