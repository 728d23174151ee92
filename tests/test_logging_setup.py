"""Tests for root logger configuration."""

from __future__ import annotations

import logging

import pytest

from hourly_weather.logging_setup import LOG_FORMAT, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test handler installation and level parsing."""

    def test_single_handler_with_format(self, restore_root_logger) -> None:
        setup_logging("INFO")
        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == LOG_FORMAT
        assert root.level == logging.INFO

    def test_level_is_case_insensitive(self, restore_root_logger) -> None:
        setup_logging("debug")
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logger) -> None:
        setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO
