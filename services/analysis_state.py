# services/analysis_state.py
# -*- coding: utf-8 -*-
"""
In-memory state of each analysis session (one per review screen).

🎯 Role
--------------------------------------
1) start(session_id, file_name)
   - new analysis: fresh generation number, status ANALYZING, previous result cleared
   - the returned generation tags the in-flight request

2) complete(...) / fail(...)
   - applied only if the tag is still the session's current generation
   - a response from a superseded request is discarded (returns False)

3) reset(session_id)
   - "Novo Arquivo": new generation so any in-flight request is abandoned,
     status back to IDLE

Generations come from one counter for the whole store, so a session that was
evicted and later recreated never hands out a number an abandoned request
still holds.

Sessions that are not ANALYZING are evicted, least recently touched first,
once the store holds more than max_sessions. No persistence.
"""

from __future__ import annotations

import itertools
import threading
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from atos.types import ExtractionResponse, Group
from core.config import MAX_SESSIONS
from core.logging import log_event, logger, utc_now

IDLE = "IDLE"
ANALYZING = "ANALYZING"
SUCCESS = "SUCCESS"
ERROR = "ERROR"


@dataclass
class AnalysisSession:
    session_id: str
    generation: int = 0
    status: str = IDLE
    file_name: str = ""
    data: Optional[ExtractionResponse] = None
    groups: List[Group] = field(default_factory=list)
    error: Optional[str] = None
    updated_at: datetime = field(default_factory=utc_now)


class AnalysisStore:
    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, AnalysisSession]" = OrderedDict()
        self._generations = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    # ---------------------------------------------------------
    # internals (caller holds the lock)
    # ---------------------------------------------------------

    def _touch(self, session_id: str) -> AnalysisSession:
        session = self._sessions.get(session_id)
        if session is None:
            session = AnalysisSession(session_id=session_id)
            self._sessions[session_id] = session
        self._sessions.move_to_end(session_id)
        session.updated_at = utc_now()
        return session

    def _evict(self, keep: str) -> None:
        overflow = len(self._sessions) - self.max_sessions
        if overflow <= 0:
            return

        # oldest first; in-flight analyses and the session just touched stay
        candidates = [sid for sid, s in self._sessions.items() if s.status != ANALYZING and sid != keep]
        for sid in candidates[:overflow]:
            del self._sessions[sid]
            logger.debug(f"[analysis_state] evicted session {sid}")

    def _is_current(self, session: AnalysisSession, generation: int) -> bool:
        if session.generation != generation:
            logger.info(
                f"[analysis_state] {session.session_id}: discarding result of generation "
                f"{generation} (current {session.generation})"
            )
            return False
        return True

    # ---------------------------------------------------------
    # public API
    # ---------------------------------------------------------

    def get(self, session_id: str) -> AnalysisSession:
        """Snapshot copy; unknown (or evicted) ids read as IDLE."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return AnalysisSession(session_id=session_id)
            return replace(session, groups=list(session.groups))

    def start(self, session_id: str, file_name: str) -> int:
        with self._lock:
            session = self._touch(session_id)
            session.generation = next(self._generations)
            session.status = ANALYZING
            session.file_name = file_name
            session.data = None
            session.groups = []
            session.error = None
            generation = session.generation
            self._evict(keep=session_id)

        log_event(session_id, "analysis_start", generation=generation, file_name=file_name)
        return generation

    def complete(
        self,
        session_id: str,
        generation: int,
        data: ExtractionResponse,
        groups: List[Group],
    ) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)
            applied = session is not None and self._is_current(session, generation)
            if applied:
                session = self._touch(session_id)
                session.status = SUCCESS
                session.data = data
                session.groups = list(groups)
                session.error = None
                self._evict(keep=session_id)

        log_event(
            session_id,
            "analysis_success" if applied else "analysis_superseded",
            generation=generation,
            acts=len(data.acts),
            groups=[g.name for g in groups],
        )
        return applied

    def fail(self, session_id: str, generation: int, message: str) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)
            applied = session is not None and self._is_current(session, generation)
            if applied:
                session = self._touch(session_id)
                session.status = ERROR
                session.data = None
                session.groups = []
                session.error = message
                self._evict(keep=session_id)

        log_event(
            session_id,
            "analysis_error" if applied else "analysis_superseded",
            generation=generation,
            error=message,
        )
        return applied

    def reset(self, session_id: str) -> AnalysisSession:
        with self._lock:
            session = self._touch(session_id)
            session.generation = next(self._generations)
            session.status = IDLE
            session.file_name = ""
            session.data = None
            session.groups = []
            session.error = None
            snapshot = replace(session, groups=[])
            self._evict(keep=session_id)

        log_event(session_id, "analysis_reset", generation=snapshot.generation)
        return snapshot


# Process-wide store used by the routers
ANALYSIS_SESSIONS = AnalysisStore()
