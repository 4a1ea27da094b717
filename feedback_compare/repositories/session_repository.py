from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Optional

from feedback_compare.services.feedback_session import FeedbackSession


@dataclass
class SessionRepository:
    """
    Repository pattern: in-memory FeedbackSession store keyed by browser session id.
    Bounded two ways: sessions idle longer than `idle_ttl_seconds` are dropped, and once
    `max_sessions` is reached the least recently used one is evicted.
    Nothing is persisted; sessions vanish with the process.
    """
    max_sessions: int = 200
    idle_ttl_seconds: float = 3600
    clock: Callable[[], float] = time.monotonic
    _sessions: "OrderedDict[str, tuple[FeedbackSession, float]]" = field(default_factory=OrderedDict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _purge_expired(self, now: float) -> None:
        # oldest first, so stop at the first one still fresh
        while self._sessions:
            sid, (_, last_seen) = next(iter(self._sessions.items()))
            if now - last_seen <= self.idle_ttl_seconds:
                break
            del self._sessions[sid]

    def get(self, session_id: str) -> Optional[FeedbackSession]:
        with self._lock:
            now = self.clock()
            self._purge_expired(now)
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            self._sessions[session_id] = (entry[0], now)
            self._sessions.move_to_end(session_id)
            return entry[0]

    def get_or_create(self, session_id: str) -> FeedbackSession:
        with self._lock:
            now = self.clock()
            self._purge_expired(now)
            entry = self._sessions.get(session_id)
            session = entry[0] if entry is not None else FeedbackSession()
            self._sessions[session_id] = (session, now)
            self._sessions.move_to_end(session_id)
            while len(self._sessions) > self.max_sessions:
                self._sessions.popitem(last=False)
            return session

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
