# routers/practice.py
from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Header, HTTPException, Query
from pydantic import ValidationError

import practice
from routers.marking import feedback_for, validate_answer_text
from schemas.practice import (
    HistoryResponse,
    ResetRequest,
    ResetResponse,
    StatsResponse,
    SubmitRequest,
    SubmitResponse,
)
from schemas.questions import Question
from session import accuracy

router = APIRouter(prefix="/practice", tags=["practice"])

SessionId = Annotated[str, Header(alias="x-session-id", min_length=1, max_length=64)]


@router.get("/next", response_model=Question)
def next_question(func: Optional[str] = None, angle: Optional[int] = None):
    if (func is None) != (angle is None):
        raise HTTPException(status_code=422, detail="func and angle must be given together")
    previous = None
    if func is not None:
        try:
            previous = Question(func=func, angle=angle)
        except ValidationError:
            raise HTTPException(status_code=422, detail="unknown question") from None
    return practice.get_next_question(previous)


@router.post("/submit", response_model=SubmitResponse)
def submit(req: SubmitRequest, x_session_id: SessionId = practice.DEFAULT_SESSION):
    msg = validate_answer_text(req.answer)
    if msg:
        stats = practice.get_session(x_session_id).stats
        return {"ok": False, "feedback": msg, "stats": stats, "accuracy": accuracy(stats)}

    res = practice.submit_answer(req.question, req.answer, session_id=x_session_id)
    return {
        "ok": True,
        "correct": res.is_correct,
        "expected": res.correct_answer,
        "feedback": feedback_for(req.question, req.answer, res.is_correct, res.correct_answer),
        "stats": res.updated_stats,
        "accuracy": accuracy(res.updated_stats),
        "entry": res.new_history_entry,
    }


@router.post("/reset", response_model=ResetResponse)
def reset(req: Optional[ResetRequest] = None, x_session_id: SessionId = practice.DEFAULT_SESSION):
    current = req.question if req is not None else None
    res = practice.reset_session(current, session_id=x_session_id)
    return {"ok": True, "stats": res.stats, "accuracy": accuracy(res.stats), "question": res.question}


@router.get("/stats", response_model=StatsResponse)
def stats(x_session_id: SessionId = practice.DEFAULT_SESSION):
    s = practice.get_session(x_session_id).stats
    return {"ok": True, "stats": s, "accuracy": accuracy(s)}


@router.get("/history", response_model=HistoryResponse)
def history(
    x_session_id: SessionId = practice.DEFAULT_SESSION,
    limit: Optional[int] = Query(default=None, ge=1, le=500),
):
    items = list(practice.get_session(x_session_id).history)
    if limit is not None:
        items = items[:limit]
    return {"ok": True, "items": items, "count": len(items)}
