"""In-memory store of document analysis sessions.

Sessions live in process memory only. They expire after a period without
access, and the least recently used session is evicted when the store is
full.
"""

import logging
import time
from collections.abc import Callable

from ..engine import AnalysisSession, KeywordRegistry, SessionNotFoundError

logger = logging.getLogger(__name__)


class SessionStore:
    """Creates, looks up and expires analysis sessions."""

    def __init__(
        self,
        ttl_seconds: float,
        max_sessions: int,
        max_keywords: int | None = None,
        max_keyword_length: int | None = None,
        max_visible_lines: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self.max_keywords = max_keywords
        self.max_keyword_length = max_keyword_length
        self.max_visible_lines = max_visible_lines
        self._clock = clock
        self._sessions: dict[str, AnalysisSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> AnalysisSession:
        """Open a new, unloaded session."""
        self.expire()
        while len(self._sessions) >= self.max_sessions:
            oldest = min(self._sessions.values(), key=lambda s: s.last_access)
            logger.info(f"Session store full, evicting session {oldest.id}")
            del self._sessions[oldest.id]

        session = AnalysisSession(
            registry=KeywordRegistry(
                max_keywords=self.max_keywords,
                max_keyword_length=self.max_keyword_length,
            ),
            max_visible_lines=self.max_visible_lines,
        )
        session.last_access = self._clock()
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> AnalysisSession:
        """Look up a session and mark it as accessed.

        Raises:
            SessionNotFoundError: If the session does not exist or expired.
        """
        self.expire()
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        session.last_access = self._clock()
        return session

    def delete(self, session_id: str) -> None:
        """Close a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def expire(self) -> int:
        """Drop sessions idle for longer than the TTL; return how many."""
        cutoff = self._clock() - self.ttl_seconds
        expired = [sid for sid, s in self._sessions.items() if s.last_access < cutoff]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug(f"Expired {len(expired)} idle session(s)")
        return len(expired)
