# app/core/errors.py
from __future__ import annotations


class InvalidSentimentError(ValueError):
    """El juicio de sentimiento no cumple el contrato {label, confidence}."""


class InvalidScoreError(ValueError):
    """Score no numérico (NaN) entregado al normalizador o al intérprete."""
