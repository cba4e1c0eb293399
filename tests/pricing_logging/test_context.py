"""Tests for logging context managers."""

import logging

import pytest

from return_pricing.pricing_logging import ContextFilter, LogContext, log_context, log_order_context


@pytest.mark.unit
class TestLogContext:
    @pytest.fixture(autouse=True)
    def clean_context(self):
        LogContext.clear()
        yield
        LogContext.clear()

    @pytest.fixture
    def logger(self):
        logger = logging.getLogger("test.context")
        logger.setLevel(logging.DEBUG)
        return logger

    @pytest.fixture
    def captured_records(self, logger):
        """Capture log records for inspection."""
        records: list[logging.LogRecord] = []

        class RecordCapture(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(record)

        handler = RecordCapture()
        handler.addFilter(ContextFilter())
        logger.addHandler(handler)
        yield records
        logger.removeHandler(handler)

    def test_log_context_adds_extra_fields(self, logger, captured_records):
        with log_context(driver_id="driver-123", customer_id="cust-456"):
            logger.info("Test message")

        record = captured_records[0]
        assert record.driver_id == "driver-123"
        assert record.customer_id == "cust-456"

    def test_log_context_clears_on_exit(self, logger, captured_records):
        with log_context(order_id="order-002"):
            pass
        logger.info("after")

        assert not hasattr(captured_records[0], "order_id")
        assert LogContext.get() == {}

    def test_nested_context_restores_outer_fields(self, logger, captured_records):
        with log_context(order_id="order-1"):
            with log_context(driver_id="driver-9"):
                logger.info("inner")
            logger.info("outer")

        inner, outer = captured_records
        assert inner.order_id == "order-1"
        assert inner.driver_id == "driver-9"
        assert outer.order_id == "order-1"
        assert not hasattr(outer, "driver_id")

    def test_explicit_extra_wins_over_context(self, logger, captured_records):
        with log_context(order_id="order-ctx"):
            logger.info("explicit", extra={"order_id": "order-extra"})

        assert captured_records[0].order_id == "order-extra"

    def test_log_order_context_defaults_correlation_to_order(self, logger, captured_records):
        with log_order_context("order-777", driver_id="driver-1"):
            logger.info("pricing")

        record = captured_records[0]
        assert record.order_id == "order-777"
        assert record.correlation_id == "order-777"
        assert record.driver_id == "driver-1"

    def test_log_order_context_custom_correlation(self, logger, captured_records):
        with log_order_context("order-778", correlation_id="req-abc"):
            logger.info("pricing")

        assert captured_records[0].correlation_id == "req-abc"

    def test_context_cleared_after_exception(self):
        with pytest.raises(RuntimeError):
            with log_order_context("order-779"):
                raise RuntimeError("fail")

        assert LogContext.get() == {}
