import logging

import pytest
from pydantic import ValidationError
from pythonjsonlogger import jsonlogger

from config.settings import Settings, build_policy, settings
from redirect_scheme.scheme import RedirectStatus, Scheme
from redirect_scheme.utils import setup_logger


def test_default_settings_policy(monkeypatch):
    for name in ("REDIRECT_ENABLED", "REDIRECT_TO", "REDIRECT_PERMANENT"):
        monkeypatch.delenv(name, raising=False)
    policy = build_policy(Settings(_env_file=None))
    assert policy.enabled is True
    assert policy.desired_scheme == Scheme.HTTPS
    assert policy.status == RedirectStatus.PERMANENT
    assert policy.replacements == ()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("REDIRECT_TO", "http")
    monkeypatch.setenv("REDIRECT_PERMANENT", "false")
    monkeypatch.setenv("REDIRECT_REPLACEMENTS", '[[":8443", ":8080"]]')
    monkeypatch.setenv("REDIRECT_IGNORE_PATHS", '["/health", "/.well-known/"]')
    monkeypatch.setenv("TRUST_FORWARDED_PROTO", "false")
    policy = build_policy(Settings(_env_file=None))
    assert policy.desired_scheme == Scheme.HTTP
    assert policy.status == RedirectStatus.TEMPORARY
    assert policy.replacements == ((":8443", ":8080"),)
    assert policy.ignore_paths == ("/health", "/.well-known/")
    assert policy.trust_forwarded_proto is False


def test_disabled_from_env(monkeypatch):
    monkeypatch.setenv("REDIRECT_ENABLED", "0")
    assert build_policy(Settings(_env_file=None)).enabled is False


def test_invalid_direction_rejected(monkeypatch):
    monkeypatch.setenv("REDIRECT_TO", "ftp")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_setup_logger_is_idempotent():
    logger = setup_logger("redirect_test_logger")
    again = setup_logger("redirect_test_logger")
    assert logger is again
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert logger.level == getattr(logging, settings.LOG_LEVEL.upper())
