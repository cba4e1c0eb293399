"""Fare and payment-split calculator for return pickups."""

from .calculator import (
    PaymentCalculator,
    calculate_payment,
    calculate_payment_with_value,
    ensure_balanced,
    validate_payment_breakdown,
)
from .exceptions import (
    ConfigIntegrityError,
    ConservationError,
    InvalidInputError,
    PermanentError,
    PricingError,
)
from .explain import explain_breakdown, net_customer_cost
from .models import DriverPayout, PaymentBreakdown, RouteInfo, ValidationResult
from .payout import create_payout
from .rates import DEFAULT_CONFIG, PaymentConfig, SizeCategory, verify_config
from .route import RouteEstimate, estimate_route, haversine_distance_miles
from .sizing import classify_item_value
from .timing import billable_minutes, format_duration

__all__ = [
    "PaymentCalculator",
    "calculate_payment",
    "calculate_payment_with_value",
    "validate_payment_breakdown",
    "ensure_balanced",
    "classify_item_value",
    "create_payout",
    "explain_breakdown",
    "net_customer_cost",
    "estimate_route",
    "haversine_distance_miles",
    "billable_minutes",
    "format_duration",
    "PaymentConfig",
    "DEFAULT_CONFIG",
    "SizeCategory",
    "verify_config",
    "RouteInfo",
    "RouteEstimate",
    "PaymentBreakdown",
    "ValidationResult",
    "DriverPayout",
    "PricingError",
    "PermanentError",
    "InvalidInputError",
    "ConfigIntegrityError",
    "ConservationError",
]
