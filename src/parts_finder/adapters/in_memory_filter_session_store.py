from __future__ import annotations

from collections import OrderedDict

from parts_finder.ports.filter_session_store import FilterSessionStore
from parts_finder.use_cases.filter_session import FilterSession

DEFAULT_MAX_SESSIONS = 1000


class InMemoryFilterSessionStore(FilterSessionStore):
    """
    Process-local session store; sessions are lost on restart.

    Holds at most ``max_sessions`` sessions. Adding one more evicts the
    session that was least recently added or fetched.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, FilterSession] = OrderedDict()

    def add(self, session: FilterSession) -> None:
        self._sessions[session.id] = session
        self._sessions.move_to_end(session.id)
        while len(self._sessions) > self._max_sessions:
            self._sessions.popitem(last=False)

    def get(self, session_id: str) -> FilterSession | None:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def remove(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
