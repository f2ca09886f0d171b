from __future__ import annotations

import math

from app.core.errors import InvalidScoreError

# (límite superior exclusivo, label); la última banda incluye 25
BANDS = (
    (5.0, "Minimal or no depression indicators detected"),
    (10.0, "Mild depression indicators detected"),
    (15.0, "Moderate depression indicators detected"),
    (20.0, "Moderately severe depression indicators detected"),
    (math.inf, "Severe depression indicators detected"),
)


def interpret(score: float) -> str:
    if math.isnan(score):
        raise InvalidScoreError("score is NaN")
    for upper, label in BANDS:
        if score < upper:
            return label
    return BANDS[-1][1]
