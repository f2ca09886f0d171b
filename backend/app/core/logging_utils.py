# app/core/logging_utils.py
from __future__ import annotations

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> int:
    """
    Configura el root logger. Sin argumento usa LOG_LEVEL de la config;
    un nivel desconocido cae a INFO. Solo agrega handler si no hay ninguno.

    Returns:
        el nivel numérico aplicado
    """
    name = (level or settings.log_level or "INFO").upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return numeric
