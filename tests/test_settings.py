"""Tests for config/settings.py — environment-driven runtime settings."""

from __future__ import annotations

import logging

from motor_rating.config.settings import EngineSettings, configure_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("MOTOR_RATING_API_PORT", raising=False)
    s = EngineSettings(_env_file=None)
    assert s.api_port == 8000
    assert s.log_level == "INFO"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("MOTOR_RATING_API_PORT", "9001")
    monkeypatch.setenv("MOTOR_RATING_LOG_LEVEL", "debug")
    s = EngineSettings(_env_file=None)
    assert s.api_port == 9001
    assert s.log_level == "debug"


def test_configure_logging_accepts_lowercase(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging(EngineSettings(_env_file=None, log_level="warning"))
    assert calls["level"] == "WARNING"
