from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.core.config import Settings
from app.services.depression.interpret import interpret
from app.services.depression.models import ScoreDrivers, ScoreResult, SentimentJudgment, coerce_sentiment
from app.services.depression.normalize import normalize
from app.services.depression.scoring import score_breakdown
from app.services.nlp.sentiment import judge_sentiment

logger = logging.getLogger(__name__)


def analyze_text(text: str, sentiment: SentimentJudgment | Mapping[str, Any]) -> ScoreResult:
    """
    Pipeline completo: léxico + sentimiento -> score crudo -> normalizado -> banda.

    `sentiment` puede ser un SentimentJudgment o un dict {label, confidence}
    ({label, score} también sirve). Un sentimiento inválido levanta
    InvalidSentimentError antes de calcular nada.
    """
    judgment = coerce_sentiment(sentiment)
    text = text or ""

    pack = score_breakdown(text, judgment)
    raw = pack["raw_score"]
    score = normalize(raw)
    label = interpret(score)

    drivers = ScoreDrivers(
        baseline=pack["baseline"],
        sentiment=pack["sentiment"],
        negative_indicators=pack["negative"],
        positive_indicators=pack["positive"],
    )

    logger.debug(
        "depression score=%.1f raw=%.3f themes=%d band=%r",
        score, raw, len(pack["negative"]) + len(pack["positive"]), label,
    )
    return ScoreResult(
        raw_score=raw,
        score=score,
        interpretation=label,
        sentiment=judgment,
        drivers=drivers,
    )


def analyze_text_with_vader(text: str, settings: Settings | None = None) -> ScoreResult:
    """Igual que analyze_text pero con el sentimiento calculado localmente (VADER)."""
    return analyze_text(text, judge_sentiment(text, settings))
