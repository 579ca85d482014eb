from __future__ import annotations

import logging
import random as _rnd
from typing import Any, List, Optional

from schemas.questions import Question

logger = logging.getLogger("trig-drill")

FUNCTIONS = ("sin", "cos", "tan")
ANGLES = (30, 45, 60)

# Rejection happens with p=1/9 per draw; this only trips on a broken rng.
MAX_DRAWS = 100


def all_questions() -> List[Question]:
    return [Question(func=f, angle=a) for f in FUNCTIONS for a in ANGLES]


def next_question(previous: Optional[Question] = None, rng: Any = None) -> Question:
    """
    Uniform draw over the 9 (func, angle) pairs, never equal to ``previous``.

    ``rng`` is anything with a ``choice`` method (defaults to the ``random``
    module). After MAX_DRAWS repeats we fall back to the first question in
    table order that differs from ``previous``.
    """
    rng = rng or _rnd
    for _ in range(MAX_DRAWS):
        q = Question(func=rng.choice(FUNCTIONS), angle=rng.choice(ANGLES))
        if q != previous:
            return q

    logger.warning("question draw hit %d repeats of %s; using fallback", MAX_DRAWS, previous)
    return next(q for q in all_questions() if q != previous)
