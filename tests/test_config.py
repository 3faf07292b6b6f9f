import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.core.config import AppSettings


def test_defaults(monkeypatch):
    for name in ("APP_NAME", "PORT", "LOG_LEVEL", "ALLOWED_ORIGINS", "BATCH_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    settings = AppSettings(_env_file=None)
    assert settings.APP_NAME == "Time Words"
    assert settings.PORT == 8089
    assert settings.LOG_LEVEL == "INFO"
    assert settings.ALLOWED_ORIGINS == []
    assert settings.BATCH_LIMIT == 100


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    settings = AppSettings(_env_file=None)
    assert settings.PORT == 9000
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_JSON is False
    assert settings.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]


def test_allowed_origins_accepts_list():
    settings = AppSettings(_env_file=None, ALLOWED_ORIGINS=[" http://a.test ", ""])
    assert settings.ALLOWED_ORIGINS == ["http://a.test"]


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, LOG_LEVEL="loud")


def test_batch_limit_must_be_positive():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, BATCH_LIMIT=0)
