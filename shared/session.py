"""Session management shared by the storefront and cashflow services"""

import uuid
import logging
from datetime import datetime
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")


class SessionManager(Generic[S]):
    """
    Manages browser sessions.

    The session type is supplied by each service through ``factory``, which is
    called with ``(session_id, now)`` and must return an object exposing
    ``session_id`` and ``updated_at``. Sessions idle for longer than
    ``max_age_hours`` are dropped whenever a new session is created.
    """

    def __init__(self, factory: Callable[[str, datetime], S], max_age_hours: int = 24):
        self.factory = factory
        self.max_age_hours = max_age_hours
        self.sessions: dict[str, S] = {}

    def create_session(self) -> S:
        """Create a new session"""
        removed = self.cleanup_old_sessions(self.max_age_hours)
        if removed:
            logger.debug(f"Dropped {removed} stale sessions")
        session = self.factory(str(uuid.uuid4()), datetime.now())
        self.sessions[session.session_id] = session
        logger.debug(f"Created session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[S]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def get_or_create_session(self, session_id: Optional[str] = None) -> S:
        """Get existing session or create new one"""
        if session_id and session_id in self.sessions:
            return self.sessions[session_id]
        return self.create_session()

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: int = 24) -> int:
        """Remove sessions older than max_age_hours"""
        now = datetime.now()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            del self.sessions[sid]
        return len(old_sessions)
