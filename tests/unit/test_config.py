import logging

import pytest

from numvec.config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("NUMVEC_LOG_LEVEL", "NUMVEC_MAX_VECTOR_LENGTH", "NUMVEC_HOST", "NUMVEC_PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.log_level == logging.INFO


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("NUMVEC_LOG_LEVEL", "debug")
    monkeypatch.setenv("NUMVEC_MAX_VECTOR_LENGTH", "3")
    monkeypatch.setenv("NUMVEC_PORT", "9000")
    settings = Settings.from_env()
    assert settings.log_level == logging.DEBUG
    assert settings.max_vector_length == 3
    assert settings.port == 9000


def test_settings_unknown_level(monkeypatch):
    monkeypatch.setenv("NUMVEC_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        Settings.from_env()
