# schemas/marking.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from schemas.questions import Angle, TrigFunction

# ---------- Evaluate ----------


class EvaluateRequest(BaseModel):
    answer: str


class EvaluateResponse(BaseModel):
    ok: bool
    literal: str = ""
    value: Optional[float] = None
    feedback: Optional[str] = None


# ---------- Mark single ----------


class MarkRequest(BaseModel):
    func: TrigFunction
    angle: Angle
    answer: str


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    expected: Optional[str] = None
