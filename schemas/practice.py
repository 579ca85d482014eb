from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from schemas.questions import Question


class Stats(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    current_streak: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_counts(self) -> "Stats":
        if self.correct > self.total:
            raise ValueError("correct cannot exceed total")
        if self.current_streak > self.best_streak:
            raise ValueError("current_streak cannot exceed best_streak")
        return self


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: Question
    user_answer: str
    correct_answer: str
    is_correct: bool
    timestamp: datetime


class SessionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    stats: Stats = Field(default_factory=Stats)
    # most recent first
    history: tuple[HistoryEntry, ...] = ()


class SubmitResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_correct: bool
    correct_answer: str
    updated_stats: Stats
    new_history_entry: HistoryEntry


class ResetResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    stats: Stats
    question: Question


# ---------- HTTP payloads ----------


class SubmitRequest(BaseModel):
    question: Question
    answer: str


class SubmitResponse(BaseModel):
    ok: bool
    correct: bool = False
    expected: Optional[str] = None
    feedback: str = ""
    stats: Stats
    accuracy: int
    entry: Optional[HistoryEntry] = None


class ResetRequest(BaseModel):
    # question on screen when reset was pressed, excluded from the next draw
    question: Optional[Question] = None


class ResetResponse(BaseModel):
    ok: bool
    stats: Stats
    accuracy: int
    question: Question


class StatsResponse(BaseModel):
    ok: bool
    stats: Stats
    accuracy: int


class HistoryResponse(BaseModel):
    ok: bool
    items: List[HistoryEntry]
    count: int
