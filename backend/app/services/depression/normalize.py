from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

from app.core.errors import InvalidScoreError

SCORE_MIN = 0.0
SCORE_MAX = 25.0
_TENTH = Decimal("0.1")


def round_tenth(value: float) -> float:
    # half-up sobre la representación decimal más corta: 4.55 -> 4.6, -0.05 -> -0.1
    return float(Decimal(repr(value)).quantize(_TENTH, rounding=ROUND_HALF_UP))


def normalize(raw_score: float) -> float:
    """
    Redondea a 1 decimal (ROUND_HALF_UP) y luego aplica clamp a [0, 25].

    Fuera de [0, 25] se recorta antes de redondear (ambos límites son
    décimas exactas); el contexto Decimal por defecto no admite 1e30.
    """
    raw_score = float(raw_score)
    if math.isnan(raw_score):
        raise InvalidScoreError("score is NaN")
    if raw_score >= SCORE_MAX:
        return SCORE_MAX
    if raw_score <= SCORE_MIN:
        return SCORE_MIN
    return min(max(round_tenth(raw_score), SCORE_MIN), SCORE_MAX)
