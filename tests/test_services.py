"""
Tests for the Rate Limiter and Session Store
============================================
"""

import pytest

from wordlens.engine.errors import InvalidKeywordError, SessionNotFoundError
from wordlens.services import RateLimiter, SessionStore


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestRateLimiter:
    def test_allows_up_to_limit(self, clock):
        limiter = RateLimiter(max_requests=2, window_seconds=60, clock=clock)

        assert limiter.check("1.2.3.4").remaining == 1
        assert limiter.check("1.2.3.4").allowed
        decision = limiter.check("1.2.3.4")
        assert not decision.allowed
        assert decision.remaining == 0

    def test_identifiers_independent(self, clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        assert limiter.check("a").allowed
        assert limiter.check("b").allowed
        assert not limiter.check("a").allowed

    def test_window_resets(self, clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        limiter.check("a")
        assert not limiter.check("a").allowed

        clock.advance(60)
        assert limiter.check("a").allowed

    def test_reset(self, clock):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        limiter.check("a")
        limiter.reset("a")
        assert limiter.check("a").allowed


class TestSessionStore:
    def test_create_and_get(self, clock):
        store = SessionStore(ttl_seconds=60, max_sessions=5, clock=clock)
        session = store.create()

        assert store.get(session.id) is session
        assert len(store) == 1

    def test_unknown_session(self, clock):
        store = SessionStore(ttl_seconds=60, max_sessions=5, clock=clock)
        with pytest.raises(SessionNotFoundError):
            store.get("missing")
        with pytest.raises(SessionNotFoundError):
            store.delete("missing")

    def test_idle_sessions_expire(self, clock):
        store = SessionStore(ttl_seconds=60, max_sessions=5, clock=clock)
        session = store.create()

        clock.advance(61)
        with pytest.raises(SessionNotFoundError):
            store.get(session.id)
        assert len(store) == 0

    def test_access_keeps_session_alive(self, clock):
        store = SessionStore(ttl_seconds=60, max_sessions=5, clock=clock)
        session = store.create()

        clock.advance(40)
        store.get(session.id)
        clock.advance(40)
        assert store.get(session.id) is session

    def test_least_recent_evicted_when_full(self, clock):
        store = SessionStore(ttl_seconds=600, max_sessions=2, clock=clock)
        first = store.create()
        clock.advance(1)
        second = store.create()
        clock.advance(1)
        store.get(first.id)
        clock.advance(1)

        store.create()
        assert len(store) == 2
        with pytest.raises(SessionNotFoundError):
            store.get(second.id)
        assert store.get(first.id) is first

    def test_registry_limits_applied(self, clock):
        store = SessionStore(ttl_seconds=60, max_sessions=5, max_keywords=1, clock=clock)
        session = store.create()
        session.add_keyword("one")
        with pytest.raises(InvalidKeywordError, match="At most 1"):
            session.add_keyword("two")

    def test_delete(self, clock):
        store = SessionStore(ttl_seconds=60, max_sessions=5, clock=clock)
        session = store.create()
        store.delete(session.id)
        assert len(store) == 0
