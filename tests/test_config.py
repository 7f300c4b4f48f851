import pytest

from tic_tac_toe_local.config import load_settings


def test_defaults_without_env(monkeypatch):
    for name in ("TTT_LOG_LEVEL", "TTT_COMPACT_BREAKPOINT", "TTT_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.log_level == "INFO"
    assert s.compact_breakpoint == 500
    assert s.cors_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTT_LOG_LEVEL", "debug")
    monkeypatch.setenv("TTT_COMPACT_BREAKPOINT", "640")
    monkeypatch.setenv("TTT_CORS_ORIGINS", "http://localhost:3000, http://127.0.0.1:3000")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.compact_breakpoint == 640
    assert s.cors_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]


def test_bad_breakpoint_raises(monkeypatch):
    monkeypatch.setenv("TTT_COMPACT_BREAKPOINT", "wide")
    with pytest.raises(ValueError):
        load_settings()
