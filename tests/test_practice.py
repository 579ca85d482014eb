from schemas.questions import Question

import practice

SIN30 = Question(func="sin", angle=30)


def test_submit_correct(session_id):
    res = practice.submit_answer(SIN30, "  0.5 ", session_id=session_id)
    assert res.is_correct is True
    assert res.correct_answer == "1/2"
    assert res.new_history_entry.user_answer == "0.5"
    assert res.updated_stats.total == 1 and res.updated_stats.correct == 1


def test_submit_incorrect_records_canonical(session_id):
    res = practice.submit_answer(SIN30, "2/3", session_id=session_id)
    assert res.is_correct is False
    assert res.new_history_entry.correct_answer == "1/2"
    assert res.updated_stats.current_streak == 0


def test_blank_submit_is_a_noop(session_id):
    practice.submit_answer(SIN30, "1/2", session_id=session_id)
    assert practice.submit_answer(SIN30, "   ", session_id=session_id) is None
    assert practice.submit_answer(SIN30, "", session_id=session_id) is None
    state = practice.get_session(session_id)
    assert state.stats.total == 1 and len(state.history) == 1


def test_history_order(session_id):
    for answer in ("a", "b", "c"):
        practice.submit_answer(SIN30, answer, session_id=session_id)
    history = practice.get_session(session_id).history
    assert [h.user_answer for h in history] == ["c", "b", "a"]


def test_reset_keeps_best_streak(session_id):
    for answer in ("1/2", ".5", "0.5", "nope", "1/2"):
        practice.submit_answer(SIN30, answer, session_id=session_id)

    res = practice.reset_session(SIN30, session_id=session_id)
    assert res.stats.total == 0
    assert res.stats.correct == 0
    assert res.stats.current_streak == 0
    assert res.stats.best_streak == 3
    assert res.question != SIN30
    assert practice.get_session(session_id).history == ()


def test_get_next_question():
    for _ in range(50):
        assert practice.get_next_question(SIN30) != SIN30
