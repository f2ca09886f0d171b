from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, ValidationError, field_validator

from app.core.errors import InvalidSentimentError

logger = logging.getLogger(__name__)

POSITIVE = "POSITIVE"
NEGATIVE = "NEGATIVE"


def _reject(message: str) -> InvalidSentimentError:
    logger.warning("Sentimiento rechazado: %s", message)
    return InvalidSentimentError(message)


class SentimentJudgment(BaseModel):
    """
    Juicio de sentimiento entregado por un clasificador externo.

    label: POSITIVE | NEGATIVE (se acepta cualquier mayúscula/minúscula)
    confidence: real finito en [0, 1]

    Cualquier otro valor levanta InvalidSentimentError; no hay fallback.
    """
    model_config = ConfigDict(frozen=True)

    label: Literal["POSITIVE", "NEGATIVE"]
    confidence: StrictFloat = Field(ge=0.0, le=1.0, allow_inf_nan=False)

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _reject(f"invalid sentiment {data!r}: {e.errors()[0]['msg']}") from e

    @field_validator("label", mode="before")
    @classmethod
    def _normalize_label(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("confidence", mode="before")
    @classmethod
    def _int_as_float(cls, v):
        # bool es subclase de int
        if isinstance(v, bool):
            raise ValueError("confidence must be a number, not bool")
        return float(v) if isinstance(v, int) else v

    @property
    def is_negative(self) -> bool:
        return self.label == NEGATIVE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SentimentJudgment:
        """Acepta {label, confidence} o {label, score} (salida típica de un clasificador)."""
        if "label" not in data:
            raise _reject("sentiment mapping has no 'label'")
        if "confidence" in data:
            conf = data["confidence"]
        elif "score" in data:
            conf = data["score"]
        else:
            raise _reject("sentiment mapping has no 'confidence' or 'score'")
        return cls(label=data["label"], confidence=conf)

    @classmethod
    def from_classifier(cls, result: Any) -> SentimentJudgment:
        """
        Convierte la respuesta de un clasificador de texto en un juicio.

        Formatos aceptados:
            {"label": "NEGATIVE", "score": 0.98}
            [{"label": "NEGATIVE", "score": 0.98}, {"label": "POSITIVE", "score": 0.02}]
            {"result": <cualquiera de los anteriores>}

        Con una lista gana el candidato de mayor score.
        """
        if isinstance(result, Mapping) and "result" in result and "label" not in result:
            result = result["result"]

        if isinstance(result, Mapping):
            return cls.from_mapping(result)

        if isinstance(result, (list, tuple)):
            candidates = [cls.from_mapping(c) for c in result if isinstance(c, Mapping)]
            if not candidates:
                raise _reject("classifier returned no candidates")
            return max(candidates, key=lambda c: c.confidence)

        raise _reject(f"unsupported classifier payload: {type(result).__name__}")


def coerce_sentiment(sentiment: SentimentJudgment | Mapping[str, Any]) -> SentimentJudgment:
    if isinstance(sentiment, SentimentJudgment):
        return sentiment
    if isinstance(sentiment, Mapping):
        return SentimentJudgment.from_mapping(sentiment)
    raise _reject(f"unsupported sentiment type: {type(sentiment).__name__}")


class IndicatorHit(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme: str
    matches: int
    weight: float
    contribution: float


class ScoreDrivers(BaseModel):
    model_config = ConfigDict(frozen=True)

    baseline: float
    sentiment: float
    negative_indicators: list[IndicatorHit] = []
    positive_indicators: list[IndicatorHit] = []


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_score: float
    score: float  # normalizado, [0, 25], 1 decimal
    interpretation: str
    sentiment: SentimentJudgment
    drivers: ScoreDrivers

    def as_dict(self) -> dict:
        return self.model_dump()
