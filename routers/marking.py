from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from matcher import canonical_answer, is_correct
from normalizer import normalize
from schemas.marking import EvaluateRequest, EvaluateResponse, MarkRequest, MarkResponse
from schemas.questions import Question

LEN_LIMIT = 100

router = APIRouter(tags=["marking"])


def validate_answer_text(s: str) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Answer required."
    if len(s) > LEN_LIMIT:
        return f"Answer too long (> {LEN_LIMIT})."
    return None


def feedback_for(q: Question, answer: str, correct: bool, expected: str) -> str:
    if correct:
        return f"{q.prompt} = {answer.strip()}"
    return f"The answer is {expected}"


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    err = validate_answer_text(req.answer)
    if err:
        return {"ok": False, "feedback": err}
    n = normalize(req.answer)
    # an answer with no numeric value (e.g. √3/2) still compares by literal
    return {"ok": True, "literal": n.literal, "value": n.numeric}


@router.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest):
    q = Question(func=req.func, angle=req.angle)
    expected = canonical_answer(q)
    msg = validate_answer_text(req.answer)
    if msg:
        return {"ok": False, "correct": False, "feedback": msg, "expected": expected}

    correct = is_correct(q, req.answer)
    return {
        "ok": True,
        "correct": correct,
        "feedback": feedback_for(q, req.answer, correct, expected),
        "expected": expected,
    }
