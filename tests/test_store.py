import threading
from datetime import UTC, datetime

import session
from schemas.practice import HistoryEntry, SessionState, Stats
from schemas.questions import Question
from store import SessionStore, store


def _entry(correct: bool) -> HistoryEntry:
    return HistoryEntry(
        question=Question(func="cos", angle=60),
        user_answer="1/2" if correct else "2",
        correct_answer="1/2",
        is_correct=correct,
        timestamp=datetime.now(UTC),
    )


def test_missing_session_loads_empty(session_id):
    assert store.load(session_id) == SessionState()


def test_apply_persists_both_records(session_id):
    e = _entry(True)
    new = store.apply(session_id, lambda s: session.submit(s, e))
    assert new.stats == Stats(correct=1, total=1, current_streak=1, best_streak=1)

    # a fresh store instance reads the same durable state
    loaded = SessionStore().load(session_id)
    assert loaded == new
    assert loaded.history[0].timestamp == e.timestamp


def test_sessions_are_isolated(session_id):
    other = session_id + "-other"
    store.apply(session_id, lambda s: session.submit(s, _entry(True)))
    assert store.load(other).stats.total == 0


def test_concurrent_writers_do_not_lose_updates(session_id):
    n_threads, per_thread = 4, 10

    def work():
        for _ in range(per_thread):
            store.apply(session_id, lambda s: session.submit(s, _entry(False)))

    threads = [threading.Thread(target=work) for _ in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    state = store.load(session_id)
    assert state.stats.total == n_threads * per_thread
    assert len(state.history) == n_threads * per_thread


def test_failed_transition_leaves_state_untouched(session_id):
    store.apply(session_id, lambda s: session.submit(s, _entry(True)))

    def boom(_state):
        raise RuntimeError("transition failed")

    try:
        store.apply(session_id, boom)
    except RuntimeError:
        pass
    assert store.load(session_id).stats.total == 1
