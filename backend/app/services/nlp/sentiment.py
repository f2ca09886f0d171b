from __future__ import annotations

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from app.core.config import Settings, settings as default_settings
from app.services.depression.models import NEGATIVE, POSITIVE, SentimentJudgment

# Analizador léxico local; solo lectura, se comparte entre llamadas
analyzer = SentimentIntensityAnalyzer()


def analyze_sentiment(text: str, settings: Settings | None = None) -> dict:
    """
    Analiza el sentimiento del texto usando VADER.

    Returns:
        dict con 'score' (-1 a +1), 'label' (positive|negative|neutral) y 'breakdown'
    """
    cfg = settings or default_settings
    if not text or len(text.strip()) < cfg.sentiment_min_text_length:
        return {"score": 0.0, "label": "neutral", "breakdown": {}}

    scores = analyzer.polarity_scores(text)
    compound = scores['compound']

    if compound >= cfg.sentiment_neutral_band:
        label = "positive"
    elif compound <= -cfg.sentiment_neutral_band:
        label = "negative"
    else:
        label = "neutral"

    return {
        "score": float(compound),
        "label": label,
        "breakdown": {
            "pos": scores['pos'],
            "neg": scores['neg'],
            "neu": scores['neu']
        }
    }


def judge_sentiment(text: str, settings: Settings | None = None) -> SentimentJudgment:
    """
    Traduce la salida de VADER al contrato {label, confidence}.

    neutral -> POSITIVE con confianza 0.0 (no mueve el score)
    """
    result = analyze_sentiment(text, settings)
    if result["label"] == "neutral":
        return SentimentJudgment(label=POSITIVE, confidence=0.0)

    label = NEGATIVE if result["label"] == "negative" else POSITIVE
    return SentimentJudgment(label=label, confidence=min(abs(result["score"]), 1.0))
