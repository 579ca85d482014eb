# practice.py
"""
Entry points a front end calls: submit an answer, reset the session, draw
the next question. Everything returned is a frozen snapshot.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Optional

import session
from generator import next_question
from matcher import canonical_answer, is_correct
from schemas.practice import HistoryEntry, ResetResult, SessionState, SubmitResult
from schemas.questions import Question
from store import SessionStore
from store import store as default_store

logger = logging.getLogger("trig-drill")

DEFAULT_SESSION = "default"


def get_next_question(previous: Optional[Question] = None) -> Question:
    return next_question(previous)


def get_session(
    session_id: str = DEFAULT_SESSION, store: Optional[SessionStore] = None
) -> SessionState:
    return (store or default_store).load(session_id)


def submit_answer(
    question: Question,
    raw_answer: str,
    session_id: str = DEFAULT_SESSION,
    store: Optional[SessionStore] = None,
) -> Optional[SubmitResult]:
    """
    Mark ``raw_answer`` and fold the outcome into the session.

    Blank answers are filtered here as a no-op (returns None, store untouched).
    """
    if not raw_answer or not raw_answer.strip():
        return None

    correct = is_correct(question, raw_answer)
    entry = HistoryEntry(
        question=question,
        user_answer=raw_answer.strip(),
        correct_answer=canonical_answer(question),
        is_correct=correct,
        timestamp=datetime.now(UTC),
    )
    state = (store or default_store).apply(session_id, lambda s: session.submit(s, entry))

    logger.info(
        "submit session=%s question=%s correct=%s streak=%d",
        session_id,
        question.key,
        correct,
        state.stats.current_streak,
    )
    return SubmitResult(
        is_correct=correct,
        correct_answer=entry.correct_answer,
        updated_stats=state.stats,
        new_history_entry=entry,
    )


def reset_session(
    current_question: Optional[Question] = None,
    session_id: str = DEFAULT_SESSION,
    store: Optional[SessionStore] = None,
) -> ResetResult:
    state = (store or default_store).apply(session_id, session.reset)
    logger.info("reset session=%s best_streak=%d", session_id, state.stats.best_streak)
    return ResetResult(stats=state.stats, question=next_question(current_question))
