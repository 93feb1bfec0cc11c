from __future__ import annotations

import logging

import pytest

from levelmeter.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("LEVELMETER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LEVELMETER_DEBUG", raising=False)
    return monkeypatch


def test_configure_root_uses_default_level(clean_env):
    level = logging_utils.configure_root(logging.WARNING)

    assert level == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_root_accepts_level_name(clean_env):
    assert logging_utils.configure_root("error") == logging.ERROR


def test_explicit_env_level_wins(clean_env):
    clean_env.setenv("LEVELMETER_LOG_LEVEL", "DEBUG")

    assert logging_utils.configure_root(logging.ERROR) == logging.DEBUG


def test_numeric_env_level(clean_env):
    clean_env.setenv("LEVELMETER_LOG_LEVEL", "30")

    assert logging_utils.configure_root() == logging.WARNING


def test_debug_flag_forces_debug(clean_env):
    clean_env.setenv("LEVELMETER_DEBUG", "yes")

    assert logging_utils.configure_root() == logging.DEBUG


def test_unknown_env_level_falls_back_to_info(clean_env):
    clean_env.setenv("LEVELMETER_LOG_LEVEL", "loud")

    assert logging_utils.configure_root(logging.ERROR) == logging.INFO


def test_level_name():
    assert logging_utils.level_name(logging.INFO) == "INFO"


def test_zero_env_level_is_honoured(clean_env):
    clean_env.setenv("LEVELMETER_LOG_LEVEL", "0")

    assert logging_utils.configure_root(logging.ERROR) == logging.NOTSET


def test_explicit_level_beats_debug_flag(clean_env):
    clean_env.setenv("LEVELMETER_LOG_LEVEL", "WARNING")
    clean_env.setenv("LEVELMETER_DEBUG", "1")

    assert logging_utils.configure_root() == logging.WARNING
