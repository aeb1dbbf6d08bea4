import logging

import pytest

from pie import config
from pie.interpreter import Interpreter


def test_recursion_limit_default(monkeypatch):
    monkeypatch.delenv("PIE_RECURSION_LIMIT", raising=False)
    assert config.get_recursion_limit() == 10000


@pytest.mark.parametrize(
    "raw, expected",
    [("20000", 20000), (" 1500 ", 1500), ("10", 1000), ("", 10000)],
)
def test_recursion_limit_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("PIE_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


def test_recursion_limit_must_be_integer(monkeypatch):
    monkeypatch.setenv("PIE_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError):
        config.get_recursion_limit()


def test_log_level_unset(monkeypatch):
    monkeypatch.delenv("PIE_LOG_LEVEL", raising=False)
    assert config.get_log_level() is None


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("PIE_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG


def test_log_level_must_name_a_level(monkeypatch):
    monkeypatch.setenv("PIE_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        config.get_log_level()


@pytest.fixture
def pie_logger():
    logger = logging.getLogger("pie")
    previous = logger.level
    logger.setLevel(logging.NOTSET)
    yield logger
    logger.setLevel(previous)


def test_configure_logging_sets_pie_logger(monkeypatch, pie_logger):
    monkeypatch.setenv("PIE_LOG_LEVEL", "ERROR")
    config.configure_logging()
    assert pie_logger.level == logging.ERROR


def test_interpreter_leaves_logger_alone(monkeypatch, pie_logger):
    monkeypatch.setenv("PIE_LOG_LEVEL", "ERROR")
    Interpreter()
    assert pie_logger.level == logging.NOTSET
