# normalizer.py

from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional

# Plain decimals only: "2", "-0.5", ".5", "5." (no exponents, no inf/nan).
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")
_WS_RE = re.compile(r"\s+")


class Normalized(NamedTuple):
    literal: str
    numeric: Optional[float]


def _parse_decimal(s: str) -> Optional[float]:
    if _DECIMAL_RE.fullmatch(s) is None:
        return None
    val = float(s)
    return val if math.isfinite(val) else None


def _eval_literal(literal: str) -> Optional[float]:
    """
    "A/B" with both sides plain decimals and B != 0 -> A/B.
    Otherwise a plain decimal, otherwise None. Radicals are never evaluated.
    """
    if literal.count("/") == 1:
        num_str, den_str = literal.split("/")
        num = _parse_decimal(num_str)
        den = _parse_decimal(den_str)
        if num is not None and den is not None and den != 0:
            return num / den
    return _parse_decimal(literal)


def canonical_literal(raw: str) -> str:
    return _WS_RE.sub("", raw.strip().lower())


def normalize(raw: str) -> Normalized:
    literal = canonical_literal(raw)
    return Normalized(literal, _eval_literal(literal))
