"""Tests for the exception hierarchy."""

import pytest

from return_pricing.exceptions import (
    ConfigIntegrityError,
    ConservationError,
    InvalidInputError,
    PermanentError,
    PricingError,
)


class TestExceptionHierarchy:
    def test_permanent_errors_inherit_from_pricing_error(self):
        assert issubclass(PermanentError, PricingError)
        assert issubclass(InvalidInputError, PermanentError)
        assert issubclass(ConfigIntegrityError, PermanentError)
        assert issubclass(ConservationError, PermanentError)


class TestExceptionAttributes:
    def test_pricing_error_stores_message(self):
        err = PricingError("test message")
        assert err.message == "test message"
        assert str(err) == "test message"

    def test_pricing_error_default_details_is_empty_dict(self):
        assert PricingError("test").details == {}

    def test_invalid_input_with_details(self):
        err = InvalidInputError("tip must be non-negative", details={"field": "tip", "value": -1})
        assert err.details["field"] == "tip"

    def test_catch_all_pricing_errors(self):
        for err in (
            InvalidInputError("input"),
            ConfigIntegrityError("config"),
            ConservationError("balance"),
        ):
            with pytest.raises(PricingError):
                raise err
