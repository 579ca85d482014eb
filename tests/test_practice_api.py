from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

SIN30 = {"func": "sin", "angle": 30}


def _submit(session_id, answer, question=SIN30):
    return client.post(
        "/practice/submit",
        json={"question": question, "answer": answer},
        headers={"x-session-id": session_id},
    )


def test_submit_and_stats(session_id):
    r = _submit(session_id, "1/2")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["correct"] is True
    assert body["expected"] == "1/2"
    assert body["stats"] == {"correct": 1, "total": 1, "current_streak": 1, "best_streak": 1}
    assert body["accuracy"] == 100
    assert body["entry"]["user_answer"] == "1/2"

    body = _submit(session_id, "0.3").json()
    assert body["correct"] is False
    assert body["feedback"] == "The answer is 1/2"
    assert body["accuracy"] == 50

    r = client.get("/practice/stats", headers={"x-session-id": session_id})
    assert r.json()["stats"]["total"] == 2
    assert r.json()["accuracy"] == 50


def test_blank_submit(session_id):
    body = _submit(session_id, "  ").json()
    assert body["ok"] is False
    assert body["feedback"] == "Answer required."
    assert body["stats"]["total"] == 0
    assert body["accuracy"] == 0


def test_history_roundtrip(session_id):
    for answer in ("a", "b", "c"):
        _submit(session_id, answer)
    r = client.get("/practice/history", headers={"x-session-id": session_id})
    body = r.json()
    assert body["count"] == 3
    assert [h["user_answer"] for h in body["items"]] == ["c", "b", "a"]
    assert body["items"][0]["question"] == SIN30

    r = client.get("/practice/history", params={"limit": 1}, headers={"x-session-id": session_id})
    assert r.json()["count"] == 1


def test_reset(session_id):
    _submit(session_id, "1/2")
    _submit(session_id, "0.5")
    r = client.post(
        "/practice/reset", json={"question": SIN30}, headers={"x-session-id": session_id}
    )
    assert r.status_code == 200
    body = r.json()
    assert body["stats"] == {"correct": 0, "total": 0, "current_streak": 0, "best_streak": 2}
    assert body["question"] != SIN30

    r = client.get("/practice/history", headers={"x-session-id": session_id})
    assert r.json()["items"] == []


def test_reset_without_body(session_id):
    r = client.post("/practice/reset", headers={"x-session-id": session_id})
    assert r.status_code == 200
    assert r.json()["stats"]["total"] == 0


def test_sessions_do_not_share_stats(session_id):
    _submit(session_id, "1/2")
    r = client.get("/practice/stats", headers={"x-session-id": session_id + "-b"})
    assert r.json()["stats"]["total"] == 0


def test_next_question():
    for _ in range(20):
        r = client.get("/practice/next", params=SIN30)
        assert r.status_code == 200
        assert r.json() != SIN30
    assert client.get("/practice/next").status_code == 200


def test_next_question_bad_params():
    assert client.get("/practice/next", params={"func": "sin"}).status_code == 422
    assert client.get("/practice/next", params={"func": "sec", "angle": 30}).status_code == 422
