"""Rate schedule for customer charges, driver pay and company revenue."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigIntegrityError

SizeCategory = Literal["S", "M", "L", "XL"]

# Shares are compared against totals with the same slack the breakdown validator uses
_SPLIT_TOLERANCE = 0.01


class PaymentConfig(BaseModel):
    """Immutable rate schedule. Distance rates are per mile, time rates per hour."""

    model_config = ConfigDict(frozen=True)

    base_price: float = 3.99
    driver_base_pay: float = 3.00
    company_base_fee_share: float = 0.99

    distance_rate_total: float = 0.50
    driver_distance_rate: float = 0.35
    company_distance_rate: float = 0.15

    time_rate_total: float = 12.00
    driver_time_rate: float = 8.00
    company_time_rate: float = 4.00

    size_upcharges: dict[str, float] = Field(
        default_factory=lambda: {"S": 0.0, "M": 0.0, "L": 2.00, "XL": 4.00}
    )
    driver_size_bonuses: dict[str, float] = Field(
        default_factory=lambda: {"S": 0.0, "M": 0.0, "L": 1.00, "XL": 2.00}
    )

    service_fee_rate: float = Field(default=0.15, ge=0.0)
    multi_item_fee: float = 1.50
    rush_fee: float = 3.00
    small_order_fee: float = 2.00
    small_order_threshold: float = 8.00

    def integrity_errors(self) -> list[str]:
        """List every split rate whose driver and company shares miss the total."""
        splits = (
            ("base", self.base_price, self.driver_base_pay, self.company_base_fee_share),
            (
                "distance",
                self.distance_rate_total,
                self.driver_distance_rate,
                self.company_distance_rate,
            ),
            ("time", self.time_rate_total, self.driver_time_rate, self.company_time_rate),
        )
        errors = []
        for name, total, driver, company in splits:
            if abs(total - (driver + company)) >= _SPLIT_TOLERANCE:
                errors.append(
                    f"{name} rate {total:.2f} != driver {driver:.2f} + company {company:.2f}"
                )
        return errors


DEFAULT_CONFIG = PaymentConfig()


def verify_config(config: PaymentConfig) -> None:
    """Raise ConfigIntegrityError if any split rate does not add up."""
    errors = config.integrity_errors()
    if errors:
        raise ConfigIntegrityError(
            "Payment config split rates do not add up",
            details={"mismatches": errors},
        )
