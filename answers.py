# answers.py
# Fixed answer key: 3 functions x 3 reference angles.
# First entry of every tuple is the canonical form shown to the learner.

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

import sympy

from schemas.questions import Question

ACCEPTED_ANSWERS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "sin-30": ("1/2", "0.5", ".5"),
        "sin-45": ("√2/2", "0.707", "0.7071", "1/√2", "sqrt(2)/2"),
        "sin-60": ("√3/2", "0.866", "0.8660", "sqrt(3)/2"),
        "cos-30": ("√3/2", "0.866", "0.8660", "sqrt(3)/2"),
        "cos-45": ("√2/2", "0.707", "0.7071", "1/√2", "sqrt(2)/2"),
        "cos-60": ("1/2", "0.5", ".5"),
        "tan-30": ("√3/3", "0.577", "0.5773", "1/√3", "sqrt(3)/3"),
        "tan-45": ("1", "1.0"),
        "tan-60": ("√3", "1.732", "1.7320", "sqrt(3)"),
    }
)

# Offered in select mode; deliberately fewer than the number of questions.
ANSWER_CHOICES: Tuple[Dict[str, str], ...] = tuple(
    {"value": v, "label": v} for v in ("1/2", "√2/2", "√3/2", "√3/3", "1", "√3")
)

_SYMPY_FUNCS = {"sin": sympy.sin, "cos": sympy.cos, "tan": sympy.tan}


def exact_value(q: Question) -> sympy.Expr:
    """Closed form, e.g. sqrt(2)/2 for sin(45°)."""
    return _SYMPY_FUNCS[q.func](sympy.pi * sympy.Rational(q.angle, 180))


def approx_value(q: Question, digits: int = 3) -> float:
    return round(float(exact_value(q).evalf()), digits)


def reference_rows(questions: List[Question]) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for q in questions:
        accepted = ACCEPTED_ANSWERS[q.key]
        rows.append(
            {
                "key": q.key,
                "func": q.func,
                "angle": q.angle,
                "prompt": q.prompt,
                "canonical": accepted[0],
                "accepted": list(accepted),
                "approx": approx_value(q),
            }
        )
    return rows
