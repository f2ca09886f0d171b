# app/core/config.py
from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    # LOG_LEVEL=DEBUG para ver el detalle de cada análisis
    log_level: str = "INFO"

    # Sentimiento local (VADER)
    # textos más cortos que esto se tratan como neutrales
    sentiment_min_text_length: int = 10
    # |compound| por debajo de esta banda = neutral
    sentiment_neutral_band: float = 0.05

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH) if ENV_PATH.exists() else None,
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
