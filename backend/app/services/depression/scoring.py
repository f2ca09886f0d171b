from __future__ import annotations

from app.services.depression.models import IndicatorHit, SentimentJudgment
from app.services.nlp.lexicon import NEGATIVE_INDICATORS, POSITIVE_INDICATORS, IndicatorRule, count_matches

BASELINE = 12.5  # punto medio de la escala 0-25
SENTIMENT_WEIGHT = 5.0


def sentiment_contribution(sentiment: SentimentJudgment) -> float:
    """Rango: -5 (POSITIVE con confianza 1) a +5 (NEGATIVE con confianza 1)"""
    delta = sentiment.confidence * SENTIMENT_WEIGHT
    return delta if sentiment.is_negative else -delta


def indicator_hits(text: str, rules: tuple[IndicatorRule, ...]) -> list[IndicatorHit]:
    hits = []
    for rule in rules:
        n = count_matches(text, rule.pattern)
        if n:
            hits.append(IndicatorHit(
                theme=rule.theme,
                matches=n,
                weight=rule.weight,
                contribution=n * rule.weight,
            ))
    return hits


def score_breakdown(text: str, sentiment: SentimentJudgment) -> dict:
    """
    Calcula el score crudo (sin clamp ni redondeo) con su desglose.

    Formula:
    score = 12.5 +/- confidence*5 + sum(matches * weight) sobre ambos léxicos

    Returns:
        dict con 'baseline', 'sentiment', 'negative', 'positive' (listas de
        IndicatorHit) y 'raw_score'
    """
    sent = sentiment_contribution(sentiment)
    negative = indicator_hits(text, NEGATIVE_INDICATORS)
    positive = indicator_hits(text, POSITIVE_INDICATORS)

    raw = BASELINE + sent
    for hit in negative:
        raw += hit.contribution
    for hit in positive:
        raw += hit.contribution

    return {
        "baseline": BASELINE,
        "sentiment": sent,
        "negative": negative,
        "positive": positive,
        "raw_score": raw,
    }


def compute_score(text: str, sentiment: SentimentJudgment) -> float:
    return score_breakdown(text, sentiment)["raw_score"]
