#!/usr/bin/env python3
"""
Tests for the logger hierarchy and registry.
"""
import io

import pytest

from lexeme_practice.logging import ConsoleLogger, LoggerRegistry, LogLevel, MemoryLogger, get_logger


def test_level_filtering():
    logger = MemoryLogger(level=LogLevel.WARNING)
    logger.error("e")
    logger.warning("w")
    logger.info("i")
    logger.debug("d")
    assert logger.messages() == ["e", "w"]


def test_console_logger_renders_context():
    stream = io.StringIO()
    logger = ConsoleLogger(level=LogLevel.DEBUG, use_colors=False, stream=stream)
    logger.warning("Hint rate limit reached", word="makan")
    assert stream.getvalue().strip() == "[WARNING] Hint rate limit reached word='makan'"


def test_registry_default_and_override():
    LoggerRegistry.reset()
    assert isinstance(get_logger(), ConsoleLogger)
    memory = MemoryLogger()
    LoggerRegistry.set(memory)
    assert get_logger() is memory
    LoggerRegistry.reset()


def test_log_level_from_name():
    assert LogLevel.from_name("debug") is LogLevel.DEBUG
    assert LogLevel.from_name("nope", default=LogLevel.INFO) is LogLevel.INFO
    with pytest.raises(ValueError):
        LogLevel.from_name("nope")
