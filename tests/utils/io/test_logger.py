"""Unit tests for the Logger console facade."""

import io
import sys

import pytest  # type: ignore

from src.utils.io.logger import Logger


@pytest.mark.parametrize(
    "method, level",
    [
        (Logger.debug, "DEBUG"),
        (Logger.info, "INFO"),
        (Logger.success, "SUCCESS"),
        (Logger.warning, "WARNING"),
        (Logger.error, "ERROR"),
    ],
)
def test_logger_prefixes_level(method, level, monkeypatch, capsys):
    """Each method writes one line prefixed with its level name."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    method("hello")
    if capsys.readouterr().out != f"{level} hello\n":
        raise AssertionError(f"Unexpected output for {level}")


def test_logger_filters_below_threshold(monkeypatch, capsys):
    """Messages under LOG_LEVEL are dropped."""
    monkeypatch.setenv("LOG_LEVEL", "warning")
    Logger.debug("a")
    Logger.info("b")
    Logger.success("c")
    Logger.warning("d")
    Logger.error("e")
    if capsys.readouterr().out.splitlines() != ["WARNING d", "ERROR e"]:
        raise AssertionError("Expected only WARNING and ERROR lines")


def test_logger_unknown_level_falls_back_to_info(monkeypatch, capsys):
    """An unrecognised LOG_LEVEL behaves like INFO."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    Logger.debug("hidden")
    Logger.info("shown")
    if capsys.readouterr().out != "INFO shown\n":
        raise AssertionError("Expected INFO threshold")


def test_logger_writes_to_current_stdout(monkeypatch):
    """Output follows sys.stdout redirection done after import."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    buffer = io.StringIO()
    monkeypatch.setattr(sys, "stdout", buffer)
    Logger.info("redirected")
    if buffer.getvalue() != "INFO redirected\n":
        raise AssertionError("Expected message in redirected stdout")
