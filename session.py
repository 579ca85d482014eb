"""Pure transitions over a practice session's (stats, history) record."""

from __future__ import annotations

from schemas.practice import HistoryEntry, SessionState, Stats


def initial_state() -> SessionState:
    return SessionState()


def submit(state: SessionState, entry: HistoryEntry) -> SessionState:
    s = state.stats
    streak = s.current_streak + 1 if entry.is_correct else 0
    stats = Stats(
        correct=s.correct + (1 if entry.is_correct else 0),
        total=s.total + 1,
        current_streak=streak,
        best_streak=max(s.best_streak, streak),
    )
    return SessionState(stats=stats, history=(entry, *state.history))


def reset(state: SessionState) -> SessionState:
    # best streak survives a reset
    return SessionState(stats=Stats(best_streak=state.stats.best_streak), history=())


def accuracy(stats: Stats) -> int:
    """Percentage correct, halves rounded up; 0 before the first answer."""
    if stats.total <= 0:
        return 0
    return (200 * stats.correct + stats.total) // (2 * stats.total)
