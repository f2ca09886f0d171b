import logging

from app.core.config import Settings
from app.core.logging_utils import setup_logging


def test_settings_defaults():
    cfg = Settings()

    assert cfg.sentiment_min_text_length == 10
    assert cfg.sentiment_neutral_band == 0.05
    assert set(Settings.model_fields) == {"log_level", "sentiment_min_text_length", "sentiment_neutral_band"}


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SENTIMENT_MIN_TEXT_LENGTH", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = Settings()

    assert cfg.sentiment_min_text_length == 3
    assert cfg.log_level == "debug"


def test_setup_logging_levels():
    root = logging.getLogger()
    previous = root.level
    try:
        assert setup_logging("debug") == logging.DEBUG
        assert root.level == logging.DEBUG
        assert setup_logging("not-a-level") == logging.INFO
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
