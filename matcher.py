from __future__ import annotations

from typing import Tuple

from answers import ACCEPTED_ANSWERS
from normalizer import normalize
from schemas.questions import Question

# Absolute tolerance for numeric answers; 4-decimal inputs like 0.7071 pass.
TOLERANCE = 0.001


class UnknownQuestionError(LookupError):
    pass


def accepted_answers(q: Question) -> Tuple[str, ...]:
    try:
        return ACCEPTED_ANSWERS[q.key]
    except KeyError:
        raise UnknownQuestionError(f"no answer key for {q.key!r}") from None


def canonical_answer(q: Question) -> str:
    return accepted_answers(q)[0]


def is_correct(q: Question, raw_answer: str) -> bool:
    candidates = accepted_answers(q)
    user = normalize(raw_answer)

    for cand_raw in candidates:
        cand = normalize(cand_raw)
        if user.literal == cand.literal:
            return True
        if user.numeric is not None and cand.numeric is not None:
            if abs(user.numeric - cand.numeric) < TOLERANCE:
                return True
    return False
