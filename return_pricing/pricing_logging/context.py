"""Thread-local logging context for adding order fields to log records."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class LogContext:
    """Thread-local storage for log context fields."""

    _local = threading.local()

    @classmethod
    def set(cls, **kwargs: Any) -> None:
        cls.get().update(kwargs)

    @classmethod
    def get(cls) -> dict[str, Any]:
        if not hasattr(cls._local, "context"):
            cls._local.context = {}
        ctx: dict[str, Any] = cls._local.context
        return ctx

    @classmethod
    def snapshot(cls) -> dict[str, Any]:
        return dict(cls.get())

    @classmethod
    def restore(cls, ctx: dict[str, Any]) -> None:
        cls._local.context = dict(ctx)

    @classmethod
    def clear(cls) -> None:
        cls._local.context = {}


class ContextFilter(logging.Filter):
    """Copies LogContext fields onto records that do not already carry them."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in LogContext.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Set logging context fields for the duration of the block.

    Nested blocks see the outer fields; leaving a block restores whatever
    was set before it was entered. Fields reach log records through
    ContextFilter, which setup_logging attaches to the handler.
    """
    previous = LogContext.snapshot()
    LogContext.set(**kwargs)
    try:
        yield
    finally:
        LogContext.restore(previous)


@contextmanager
def log_order_context(order_id: str, **kwargs: Any) -> Iterator[None]:
    """Convenience context manager for pricing and payout work on one order."""
    correlation_id = kwargs.pop("correlation_id", order_id)
    with log_context(order_id=order_id, correlation_id=correlation_id, **kwargs):
        yield
