import logging
from datetime import UTC, datetime

from .calculator import ensure_balanced, validate_payment_breakdown
from .models import DriverPayout, PaymentBreakdown
from .pricing_logging import log_order_context
from .settings import PricingSettings

logger = logging.getLogger(__name__)


def create_payout(
    breakdown: PaymentBreakdown,
    order_id: str,
    driver_id: str,
    settings: PricingSettings | None = None,
) -> DriverPayout:
    """Turn a completed order's breakdown into the payout record.

    This is where money actually moves, so an unbalanced breakdown raises
    ConservationError unless enforcement is switched off in settings.
    """
    settings = settings if settings is not None else PricingSettings()

    with log_order_context(order_id, driver_id=driver_id):
        if settings.enforce_conservation_on_payout:
            ensure_balanced(breakdown)
        else:
            result = validate_payment_breakdown(breakdown)
            if not result.is_valid:
                logger.warning("Creating payout from unbalanced breakdown: %s", result.explanation)

        payout = DriverPayout(
            order_id=order_id,
            driver_id=driver_id,
            customer_total=breakdown.total_price,
            driver_amount=breakdown.driver_total_earning,
            driver_tip=breakdown.driver_tip,
            company_amount=breakdown.company_total_revenue,
            timestamp=datetime.now(UTC).isoformat(),
        )
        logger.info(
            "Payout created: driver=%.2f company=%.2f",
            payout.driver_amount,
            payout.company_amount,
        )
    return payout
