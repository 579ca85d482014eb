from __future__ import annotations

import random as _rnd
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from answers import ANSWER_CHOICES, reference_rows
from generator import all_questions
from schemas.questions import ChoiceOut, QuestionOut

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=List[QuestionOut])
def list_questions(
    limit: Optional[int] = Query(default=None, ge=1, le=9),
    random: bool = Query(default=False, description="If true, shuffle before limiting"),
):
    qs = reference_rows(all_questions())

    if random:
        _rnd.shuffle(qs)

    if limit is not None:
        qs = qs[:limit]

    return qs


@router.get("/questions/choices", response_model=List[ChoiceOut])
def list_choices():
    return list(ANSWER_CHOICES)


@router.get("/questions/{key}", response_model=QuestionOut)
def get_question_detail(key: str):
    row = next((r for r in reference_rows(all_questions()) if r["key"] == key), None)
    if not row:
        raise HTTPException(status_code=404, detail="question not found")
    return row
