import logging
from types import SimpleNamespace

import pytest

import config
from config import DELAY_KEY, LOG_FILE_KEY, LOG_LEVEL_KEY, get_settings, get_value
from logger_config import setup_logger


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    for key in (DELAY_KEY, LOG_LEVEL_KEY, LOG_FILE_KEY):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "st", None)


def test_defaults():
    settings = get_settings()
    assert settings.analysis_delay == 2.0
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_env_values_are_normalized(monkeypatch):
    monkeypatch.setenv(DELAY_KEY, "  '0.5' ")
    monkeypatch.setenv(LOG_LEVEL_KEY, "debug")
    settings = get_settings()
    assert settings.analysis_delay == 0.5
    assert settings.log_level == "DEBUG"


def test_blank_env_value_is_ignored(monkeypatch):
    monkeypatch.setenv(DELAY_KEY, "   ")
    assert get_value(DELAY_KEY) is None
    assert get_settings().analysis_delay == 2.0


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_invalid_delay(monkeypatch, raw):
    monkeypatch.setenv(DELAY_KEY, raw)
    with pytest.raises(ValueError, match=DELAY_KEY):
        get_settings()


def test_falls_back_to_streamlit_secrets(monkeypatch):
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets={LOG_LEVEL_KEY: "warning", DELAY_KEY: "0"}))
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.analysis_delay == 0.0


def test_env_wins_over_secrets(monkeypatch):
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets={DELAY_KEY: "3"}))
    monkeypatch.setenv(DELAY_KEY, "1")
    assert get_settings().analysis_delay == 1.0


def test_missing_secrets_file_is_tolerated(monkeypatch):
    class NoSecrets:
        def get(self, key):
            raise FileNotFoundError("no secrets.toml")

    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=NoSecrets()))
    assert get_value(DELAY_KEY) is None


def _close(logger):
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


def test_setup_logger_adds_handlers_once():
    logger = setup_logger("scam_shield.test.once", level=logging.DEBUG)
    setup_logger("scam_shield.test.once", level=logging.DEBUG)
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        _close(logger)


def test_setup_logger_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_KEY, "warning")
    logger = setup_logger("scam_shield.test.env")
    try:
        assert logger.level == logging.WARNING
    finally:
        _close(logger)


def test_setup_logger_writes_log_file(tmp_path):
    log_file = tmp_path / "scam_shield.log"
    logger = setup_logger("scam_shield.test.file", log_file=str(log_file), level=logging.INFO)
    try:
        assert len(logger.handlers) == 2
        logger.info("hello from the test")
    finally:
        _close(logger)
    assert "[INFO] hello from the test" in log_file.read_text()
