"""Fare composition, value-capping and conservation checks for return pickups.

Customer charges, driver earnings and company revenue are computed side by
side from the same inputs. The customer total is then subject to the
configured total cap, and value-aware quotes are rescaled so the customer is
never charged (much) more than the item being returned is worth.
"""

import logging
import math

from .exceptions import ConservationError, InvalidInputError
from .models import PaymentBreakdown, RouteInfo, ValidationResult
from .rates import DEFAULT_CONFIG, PaymentConfig, verify_config
from .settings import PricingSettings
from .sizing import classify_item_value

logger = logging.getLogger(__name__)

# Hard-coded minimum-fare ceiling applied under the "minimum_fare_ceiling" policy.
# Intentionally not derived from PaymentConfig.base_price.
MINIMUM_FARE_CEILING = 3.99

# Value-capped totals stay one cent under the item value, never below $1.00
VALUE_CAP_MARGIN = 0.01
MINIMUM_SERVICE_CHARGE = 1.00

BALANCE_TOLERANCE = 0.01


def _require_non_negative(field: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidInputError(
            f"{field} must be a number", details={"field": field, "value": value}
        )
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(
            f"{field} must be a finite non-negative number",
            details={"field": field, "value": value},
        )


def _require_item_count(item_count: int) -> None:
    if isinstance(item_count, bool) or not isinstance(item_count, int) or item_count < 1:
        raise InvalidInputError(
            "item_count must be an integer >= 1",
            details={"field": "item_count", "value": item_count},
        )


class PaymentCalculator:
    """Computes payment breakdowns against a fixed rate schedule."""

    def __init__(
        self,
        config: PaymentConfig | None = None,
        settings: PricingSettings | None = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self.settings = settings if settings is not None else PricingSettings()

        if self.settings.verify_config_integrity:
            verify_config(self.config)

    def calculate(
        self,
        route: RouteInfo,
        size: str = "M",
        item_count: int = 1,
        is_rush: bool = False,
        tip: float = 0.0,
    ) -> PaymentBreakdown:
        """Compose the full customer/driver/company breakdown for a pickup."""
        if self.settings.validate_inputs:
            self._validate(route, item_count, tip)

        breakdown = self._compose(route, size, item_count, is_rush, tip)
        logger.debug(
            "Composed fare: size=%s items=%d rush=%s total=%.4f driver=%.4f company=%.4f",
            size,
            item_count,
            is_rush,
            breakdown.total_price,
            breakdown.driver_total_earning,
            breakdown.company_total_revenue,
        )
        return breakdown

    def calculate_with_value(
        self,
        route: RouteInfo,
        item_value: float,
        item_count: int = 1,
        is_rush: bool = False,
        tip: float = 0.0,
    ) -> PaymentBreakdown:
        """Compose a breakdown sized by item value and capped just under that value."""
        if self.settings.validate_inputs:
            _require_non_negative("item_value", item_value)

        size = classify_item_value(item_value)
        standard = self.calculate(route, size, item_count, is_rush, tip)

        max_allowable_total = max(item_value - VALUE_CAP_MARGIN, MINIMUM_SERVICE_CHARGE)
        if standard.total_price <= max_allowable_total:
            return standard

        capped = self._cap_to_total(standard, max_allowable_total)
        logger.info(
            "Value cap applied: item_value=%.2f standard_total=%.4f capped_total=%.4f",
            item_value,
            standard.total_price,
            capped.total_price,
        )
        return capped

    def _validate(self, route: RouteInfo, item_count: int, tip: float) -> None:
        _require_non_negative("distance", route.distance)
        _require_non_negative("estimated_time", route.estimated_time)
        _require_item_count(item_count)
        _require_non_negative("tip", tip)

    def _compose(
        self,
        route: RouteInfo,
        size: str,
        item_count: int,
        is_rush: bool,
        tip: float,
    ) -> PaymentBreakdown:
        config = self.config
        hours = route.estimated_time / 60

        # Customer side
        base_price = config.base_price
        distance_fee = route.distance * config.distance_rate_total
        time_fee = hours * config.time_rate_total
        size_upcharge = config.size_upcharges.get(size, 0.0)
        multi_item_fee = (item_count - 1) * config.multi_item_fee if item_count > 1 else 0.0
        rush_fee = config.rush_fee if is_rush else 0.0

        initial_subtotal = (
            base_price + distance_fee + time_fee + size_upcharge + multi_item_fee + rush_fee
        )
        # Threshold is tested against the subtotal before the fee itself is added
        small_order_fee = (
            config.small_order_fee if initial_subtotal < config.small_order_threshold else 0.0
        )
        subtotal = initial_subtotal + small_order_fee
        service_fee = subtotal * config.service_fee_rate

        total_price = subtotal + service_fee + tip
        if self.settings.total_cap_policy == "minimum_fare_ceiling":
            total_price = min(total_price, MINIMUM_FARE_CEILING + tip)

        # Driver side
        driver_base_pay = config.driver_base_pay
        driver_distance_pay = route.distance * config.driver_distance_rate
        driver_time_pay = hours * config.driver_time_rate
        driver_size_bonus = config.driver_size_bonuses.get(size, 0.0)
        driver_tip = tip
        driver_total_earning = (
            driver_base_pay + driver_distance_pay + driver_time_pay + driver_size_bonus + driver_tip
        )

        # Company side
        company_service_fee = service_fee
        company_base_fee_share = config.company_base_fee_share
        company_distance_fee_share = route.distance * config.company_distance_rate
        company_time_fee_share = hours * config.company_time_rate
        company_total_revenue = (
            company_service_fee
            + company_base_fee_share
            + company_distance_fee_share
            + company_time_fee_share
        )

        return PaymentBreakdown(
            base_price=base_price,
            distance_fee=distance_fee,
            time_fee=time_fee,
            size_upcharge=size_upcharge,
            multi_item_fee=multi_item_fee,
            small_order_fee=small_order_fee,
            service_fee=service_fee,
            rush_fee=rush_fee,
            subtotal=subtotal,
            tip=tip,
            total_price=total_price,
            driver_base_pay=driver_base_pay,
            driver_distance_pay=driver_distance_pay,
            driver_time_pay=driver_time_pay,
            driver_size_bonus=driver_size_bonus,
            driver_tip=driver_tip,
            driver_total_earning=driver_total_earning,
            company_service_fee=company_service_fee,
            company_base_fee_share=company_base_fee_share,
            company_distance_fee_share=company_distance_fee_share,
            company_time_fee_share=company_time_fee_share,
            company_total_revenue=company_total_revenue,
        )

    def _cap_to_total(self, standard: PaymentBreakdown, capped_total: float) -> PaymentBreakdown:
        rate = self.config.service_fee_rate
        tip = standard.tip

        # A tip at or above the cap leaves nothing to charge for the service itself
        capped_subtotal = max(capped_total - tip, 0.0)
        capped_service_fee = capped_subtotal * (rate / (1 + rate))
        pre_service_total = capped_subtotal - capped_service_fee

        if standard.subtotal > 0:
            factor = pre_service_total / standard.subtotal
        else:
            factor = 0.0

        company_base_fee_share = standard.company_base_fee_share * factor
        company_distance_fee_share = standard.company_distance_fee_share * factor
        company_time_fee_share = standard.company_time_fee_share * factor

        update = {
            "base_price": standard.base_price * factor,
            "distance_fee": standard.distance_fee * factor,
            "time_fee": standard.time_fee * factor,
            "size_upcharge": standard.size_upcharge * factor,
            "multi_item_fee": standard.multi_item_fee * factor,
            "small_order_fee": standard.small_order_fee * factor,
            "rush_fee": standard.rush_fee * factor,
            "service_fee": capped_service_fee,
            "subtotal": pre_service_total,
            "total_price": max(capped_total, tip),
            "company_service_fee": capped_service_fee,
            "company_base_fee_share": company_base_fee_share,
            "company_distance_fee_share": company_distance_fee_share,
            "company_time_fee_share": company_time_fee_share,
            "company_total_revenue": (
                capped_service_fee
                + company_base_fee_share
                + company_distance_fee_share
                + company_time_fee_share
            ),
        }

        if self.settings.driver_pay_policy == "scaled":
            driver_base_pay = standard.driver_base_pay * factor
            driver_distance_pay = standard.driver_distance_pay * factor
            driver_time_pay = standard.driver_time_pay * factor
            driver_size_bonus = standard.driver_size_bonus * factor
            update.update(
                driver_base_pay=driver_base_pay,
                driver_distance_pay=driver_distance_pay,
                driver_time_pay=driver_time_pay,
                driver_size_bonus=driver_size_bonus,
                driver_total_earning=(
                    driver_base_pay
                    + driver_distance_pay
                    + driver_time_pay
                    + driver_size_bonus
                    + standard.driver_tip
                ),
            )

        return standard.model_copy(update=update)


def calculate_payment(
    route: RouteInfo,
    size: str = "M",
    item_count: int = 1,
    is_rush: bool = False,
    tip: float = 0.0,
    config: PaymentConfig = DEFAULT_CONFIG,
    settings: PricingSettings | None = None,
) -> PaymentBreakdown:
    return PaymentCalculator(config, settings).calculate(route, size, item_count, is_rush, tip)


def calculate_payment_with_value(
    route: RouteInfo,
    item_value: float,
    item_count: int = 1,
    is_rush: bool = False,
    tip: float = 0.0,
    config: PaymentConfig = DEFAULT_CONFIG,
    settings: PricingSettings | None = None,
) -> PaymentBreakdown:
    return PaymentCalculator(config, settings).calculate_with_value(
        route, item_value, item_count, is_rush, tip
    )


def validate_payment_breakdown(breakdown: PaymentBreakdown) -> ValidationResult:
    """Check that the customer total equals driver earnings plus company revenue."""
    total_in = breakdown.total_price
    total_out = breakdown.driver_total_earning + breakdown.company_total_revenue
    difference = abs(total_in - total_out)
    is_valid = difference < BALANCE_TOLERANCE

    if is_valid:
        explanation = "Payment breakdown is balanced"
    else:
        explanation = (
            f"Payment mismatch: Customer pays ${total_in:.2f}, "
            f"but driver + company = ${total_out:.2f} (difference: ${difference:.2f})"
        )
    return ValidationResult(is_valid=is_valid, difference=difference, explanation=explanation)


def ensure_balanced(breakdown: PaymentBreakdown) -> ValidationResult:
    """Like validate_payment_breakdown, but raise ConservationError when unbalanced."""
    result = validate_payment_breakdown(breakdown)
    if not result.is_valid:
        raise ConservationError(
            result.explanation,
            details={
                "total_price": breakdown.total_price,
                "driver_total_earning": breakdown.driver_total_earning,
                "company_total_revenue": breakdown.company_total_revenue,
                "difference": result.difference,
            },
        )
    return result
