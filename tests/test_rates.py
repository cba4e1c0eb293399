import pytest
from pydantic import ValidationError

from return_pricing.exceptions import ConfigIntegrityError
from return_pricing.rates import DEFAULT_CONFIG, PaymentConfig, verify_config


@pytest.mark.unit
class TestPaymentConfig:
    def test_default_schedule(self):
        assert DEFAULT_CONFIG.base_price == pytest.approx(3.99)
        assert DEFAULT_CONFIG.driver_base_pay == pytest.approx(3.00)
        assert DEFAULT_CONFIG.company_base_fee_share == pytest.approx(0.99)
        assert DEFAULT_CONFIG.size_upcharges == {"S": 0.0, "M": 0.0, "L": 2.00, "XL": 4.00}
        assert DEFAULT_CONFIG.driver_size_bonuses == {"S": 0.0, "M": 0.0, "L": 1.00, "XL": 2.00}
        assert DEFAULT_CONFIG.small_order_threshold == pytest.approx(8.00)

    def test_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.base_price = 9.99

    def test_default_splits_add_up(self):
        assert DEFAULT_CONFIG.integrity_errors() == []
        verify_config(DEFAULT_CONFIG)

    def test_reports_each_mismatched_split(self):
        config = PaymentConfig(driver_distance_rate=0.40, company_time_rate=5.00)
        errors = config.integrity_errors()

        assert len(errors) == 2
        assert errors[0].startswith("distance rate 0.50")
        assert errors[1].startswith("time rate 12.00")

    def test_verify_config_raises(self):
        with pytest.raises(ConfigIntegrityError) as exc_info:
            verify_config(PaymentConfig(company_base_fee_share=0.50))

        assert exc_info.value.details["mismatches"] == [
            "base rate 3.99 != driver 3.00 + company 0.50"
        ]
