from __future__ import annotations

import threading
from typing import Any, Callable, Dict

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from db import SessionLocal
from models import KVRecord
from schemas.practice import HistoryEntry, SessionState, Stats

STATS_KEY = "trig-stats"
HISTORY_KEY = "trig-history"

Transition = Callable[[SessionState], SessionState]


class SessionStore:
    """
    Durable (stats, history) records keyed by session id.

    Writes go through ``apply``: load both records, run a pure
    old-state -> new-state function, store both, all in one transaction.
    Row locks cover databases that support them; the process lock covers
    SQLite.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory
        self._lock = threading.Lock()

    def load(self, session_id: str) -> SessionState:
        with self._session_factory() as db:
            return self._read(db, session_id)

    def apply(self, session_id: str, transition: Transition) -> SessionState:
        with self._lock, self._session_factory.begin() as db:
            new_state = transition(self._read(db, session_id, for_update=True))
            self._write(db, session_id, new_state)
        return new_state

    # --- internals -------------------------------------------------------

    @staticmethod
    def _read(db: Session, session_id: str, for_update: bool = False) -> SessionState:
        stmt = select(KVRecord).where(
            KVRecord.session_id == session_id,
            KVRecord.key.in_((STATS_KEY, HISTORY_KEY)),
        )
        if for_update:
            stmt = stmt.with_for_update()
        rows: Dict[str, Any] = {r.key: r.value for r in db.scalars(stmt)}

        stats = Stats.model_validate(rows[STATS_KEY]) if STATS_KEY in rows else Stats()
        history = tuple(HistoryEntry.model_validate(v) for v in rows.get(HISTORY_KEY) or [])
        return SessionState(stats=stats, history=history)

    @staticmethod
    def _write(db: Session, session_id: str, state: SessionState) -> None:
        dumped = state.model_dump(mode="json")
        db.merge(KVRecord(session_id=session_id, key=STATS_KEY, value=dumped["stats"]))
        db.merge(KVRecord(session_id=session_id, key=HISTORY_KEY, value=dumped["history"]))


store = SessionStore()
