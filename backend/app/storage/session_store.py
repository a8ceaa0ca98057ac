from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from app.models.domain import HotelSearchResult, ResolvedLocation, SearchState


@dataclass(frozen=True)
class SessionSnapshot:
    session_id: str
    state: SearchState
    location: Optional[ResolvedLocation]
    result: Optional[HotelSearchResult]
    notice: Optional[str]


class SearchSession:
    """
    Search flow for one client: idle -> searching -> results.

    Every begin() bumps a generation counter and hands back a token. Only the
    holder of the newest token may install results, so a slow earlier search
    can never overwrite (or mix into) a later one. The result set is swapped
    in whole, under the lock.
    """

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self.state = SearchState.idle
        self.location: Optional[ResolvedLocation] = None
        self.result: Optional[HotelSearchResult] = None
        self.notice: Optional[str] = None
        self._generation = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            self.state = SearchState.searching
            self.notice = None
            return self._generation

    def complete(self, token: int, location: ResolvedLocation, result: HotelSearchResult) -> bool:
        with self._lock:
            if token != self._generation:
                return False
            self.location = location
            self.result = result
            self.notice = result.notice
            self.state = SearchState.results
            return True

    def fail(self, token: int, notice: str) -> bool:
        with self._lock:
            if token != self._generation:
                return False
            self.notice = notice
            self.state = SearchState.results if self.result is not None else SearchState.idle
            return True

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                session_id=self.session_id,
                state=self.state,
                location=self.location,
                result=self.result,
                notice=self.notice,
            )


class InMemorySessionStore:
    """Sessions kept in least-recently-used order; the oldest is evicted past max_sessions."""

    def __init__(self, max_sessions: int = 1000) -> None:
        self.max_sessions = max(1, max_sessions)
        self.sessions: "OrderedDict[str, SearchSession]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Optional[SearchSession]:
        with self._lock:
            session = self.sessions.get(session_id)
            if session is not None:
                self.sessions.move_to_end(session_id)
            return session

    def get_or_create(self, session_id: Optional[str] = None) -> SearchSession:
        with self._lock:
            if session_id and session_id in self.sessions:
                self.sessions.move_to_end(session_id)
                return self.sessions[session_id]
            session = SearchSession(session_id or str(uuid4()))
            self.sessions[session.session_id] = session
            while len(self.sessions) > self.max_sessions:
                self.sessions.popitem(last=False)
            return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self.sessions.pop(session_id, None) is not None
