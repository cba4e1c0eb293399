"""Tests for logging setup."""

import logging

import pytest

from return_pricing.pricing_logging import (
    ContextFilter,
    DevFormatter,
    JSONFormatter,
    PIIFilter,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers.copy()
    original_level = root_logger.level
    yield
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)


class TestSetupLogging:
    def test_setup_logging_configures_root_logger(self):
        setup_logging(level="DEBUG")
        root_logger = logging.getLogger()

        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG
        assert isinstance(root_logger.handlers[0].formatter, DevFormatter)

    def test_json_output(self):
        setup_logging(json_output=True, environment="production")
        formatter = logging.getLogger().handlers[0].formatter

        assert isinstance(formatter, JSONFormatter)
        assert formatter.environment == "production"

    def test_handler_filters(self):
        setup_logging()
        filter_types = {type(f) for f in logging.getLogger().handlers[0].filters}

        assert PIIFilter in filter_types
        assert ContextFilter in filter_types


class TestGetLogger:
    def test_get_logger_returns_named_logger(self):
        logger = get_logger("return_pricing.test")

        assert logger.name == "return_pricing.test"
        assert isinstance(logger, logging.Logger)
