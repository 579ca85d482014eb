from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_evaluate_fraction():
    r = client.post("/evaluate", json={"answer": " 1 / 2 "})
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["literal"] == "1/2"
    assert abs(data["value"] - 0.5) < 1e-12


def test_evaluate_radical_has_no_value():
    r = client.post("/evaluate", json={"answer": "√3/2"})
    data = r.json()
    assert data["ok"] is True
    assert data["literal"] == "√3/2"
    assert data["value"] is None


def test_evaluate_blank():
    r = client.post("/evaluate", json={"answer": "   "})
    data = r.json()
    assert data["ok"] is False
    assert data["feedback"] == "Answer required."


def test_evaluate_len_limit():
    r = client.post("/evaluate", json={"answer": "1" * 101})
    data = r.json()
    assert data["ok"] is False
