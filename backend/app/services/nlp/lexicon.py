from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorRule:
    """Patrón léxico con peso firmado; cada match suma `weight` al score"""
    theme: str
    pattern: re.Pattern
    weight: float


def _rule(theme: str, regex: str, weight: float) -> IndicatorRule:
    return IndicatorRule(theme=theme, pattern=re.compile(regex, re.IGNORECASE), weight=weight)


# Indicadores de riesgo (pesos positivos -> suben el score).
# Sin \b a propósito: "down" también cuenta dentro de "downhill".
NEGATIVE_INDICATORS: tuple[IndicatorRule, ...] = (
    _rule("hopelessness", r"hopeless|worthless|emptiness|despair", 1.5),
    _rule("sadness", r"sad|down|low|blue|unhappy", 0.8),
    _rule("fatigue", r"tired|exhausted|fatigue|no energy", 0.7),
    _rule("loneliness", r"alone|lonely|isolated", 0.9),
    _rule("sleep_disturbance", r"can't sleep|insomnia|sleeping too much", 0.6),
    _rule("anhedonia", r"no interest|don't care|apathy", 1.2),
    _rule("self_harm", r"suicide|death|dying|end it", 2.5),
    _rule("guilt", r"guilt|blame|fault|shame", 1.0),
    _rule("concentration", r"can't concentrate|foggy|unfocused", 0.5),
    _rule("psychomotor", r"too slow|agitated|restless", 0.5),
)

# Indicadores protectores (pesos negativos -> bajan el score)
POSITIVE_INDICATORS: tuple[IndicatorRule, ...] = (
    _rule("happiness", r"happy|joy|grateful|thankful", -1.0),
    _rule("hope", r"hopeful|looking forward|excited", -1.2),
    _rule("accomplishment", r"accomplished|achieved|proud", -0.8),
    _rule("energy", r"energetic|motivated|inspired", -0.7),
    _rule("connection", r"connected|supported|loved", -0.9),
)


def count_matches(text: str, pattern: re.Pattern) -> int:
    """
    Cuenta los matches no solapados de `pattern` en `text`.

    Returns:
        0 si el texto está vacío o no hay ocurrencias
    """
    if not text:
        return 0
    return sum(1 for _ in pattern.finditer(text))
