"""Human-readable renderings of a payment breakdown."""

from .models import PaymentBreakdown
from .rates import DEFAULT_CONFIG, PaymentConfig


def _line(label: str, amount: float) -> str:
    return f"  - {label}: ${amount:.2f}"


def explain_breakdown(breakdown: PaymentBreakdown, config: PaymentConfig = DEFAULT_CONFIG) -> str:
    """Render the customer, driver and company sides of a breakdown as plain text.

    Rates shown next to each line come from the config the breakdown was
    computed with, so pass the same config used for the calculation.
    """
    service_pct = config.service_fee_rate * 100
    lines = [
        "Payment Breakdown:",
        "",
        "Customer Pays:",
        _line("Base service", breakdown.base_price),
        _line(f"Distance (${config.distance_rate_total:.2f}/mile)", breakdown.distance_fee),
        _line(f"Time (${config.time_rate_total:.2f}/hour)", breakdown.time_fee),
        _line("Size upcharge", breakdown.size_upcharge),
        _line("Additional items", breakdown.multi_item_fee),
    ]
    if breakdown.small_order_fee > 0:
        lines.append(_line("Small order fee", breakdown.small_order_fee))
    lines += [
        _line(f"Service fee ({service_pct:g}%)", breakdown.service_fee),
        _line("Rush delivery", breakdown.rush_fee),
        _line("Tip", breakdown.tip),
        f"TOTAL: ${breakdown.total_price:.2f}",
        "",
        "Driver Earns:",
        _line("Base pay", breakdown.driver_base_pay),
        _line(
            f"Distance pay (${config.driver_distance_rate:.2f}/mile)",
            breakdown.driver_distance_pay,
        ),
        _line(f"Time pay (${config.driver_time_rate:.2f}/hour)", breakdown.driver_time_pay),
        _line("Size bonus", breakdown.driver_size_bonus),
        _line("Tip (100%)", breakdown.driver_tip),
        f"TOTAL: ${breakdown.driver_total_earning:.2f}",
        "",
        "Company Gets:",
        _line("Service fee", breakdown.company_service_fee),
        _line("Base fee share", breakdown.company_base_fee_share),
        _line("Distance fee share", breakdown.company_distance_fee_share),
        _line("Time fee share", breakdown.company_time_fee_share),
        f"TOTAL: ${breakdown.company_total_revenue:.2f}",
    ]
    return "\n".join(lines)


def net_customer_cost(
    breakdown: PaymentBreakdown, item_value: float, tax_amount: float = 0.0
) -> float:
    """Amount the customer is out of pocket after the item refund.

    Negative when the refund exceeds the pickup charge plus tax.
    """
    return breakdown.total_price + tax_amount - item_value
