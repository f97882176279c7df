"""Tests for logger configuration."""

import logging

import pytest

from app.logger_config import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_level():
    yield
    configure_logging("INFO")


def test_configure_logging_updates_loggers_created_earlier():
    entry_logger = get_logger("main")
    app_logger = get_logger("app.services.price_comparison_service")

    configure_logging("WARNING")

    assert entry_logger.level == logging.WARNING
    assert app_logger.level == logging.WARNING


def test_loggers_created_later_use_configured_level():
    configure_logging("debug")

    assert get_logger("tests.late_logger").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    configure_logging("LOUD")

    assert get_logger("main").level == logging.INFO
