import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from sfx_engine.core.settings import DEFAULT_SAMPLE_RATE, EngineSettings


def test_defaults(monkeypatch):
    for name in ("SFX_SAMPLE_RATE", "SFX_DEVICE", "SFX_SEED", "SFX_PORT", "SFX_LOG_LEVEL", "SFX_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    s = EngineSettings.from_env()
    assert s.sample_rate == DEFAULT_SAMPLE_RATE == 44100
    assert s.device == "cpu"
    assert s.seed is None
    assert s.port == 8000
    assert s.log_level == "INFO"
    assert s.allowed_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SFX_SAMPLE_RATE", "22050")
    monkeypatch.setenv("SFX_SEED", "7")
    monkeypatch.setenv("SFX_LOG_LEVEL", "debug")
    monkeypatch.setenv("SFX_CORS_ORIGINS", "http://localhost:3000, https://example.org")
    s = EngineSettings.from_env()
    assert s.sample_rate == 22050
    assert s.seed == 7
    assert s.log_level == "DEBUG"
    assert s.allowed_origins == ["http://localhost:3000", "https://example.org"]


def test_bad_integer_falls_back(monkeypatch):
    monkeypatch.setenv("SFX_PORT", "eighty")
    monkeypatch.setenv("SFX_SEED", "x")
    s = EngineSettings.from_env()
    assert s.port == 8000
    assert s.seed is None


def test_non_positive_sample_rate_rejected():
    with pytest.raises(ValueError):
        EngineSettings(sample_rate=0)
