from pydantic import BaseModel, ConfigDict, Field


class RouteInfo(BaseModel):
    """Route supplied per calculation."""

    distance: float  # miles
    estimated_time: float  # minutes


class PaymentBreakdown(BaseModel):
    """Allocation of a single fare across customer charge, driver pay and company revenue."""

    model_config = ConfigDict(frozen=True)

    # Customer charges
    base_price: float
    distance_fee: float
    time_fee: float
    size_upcharge: float
    multi_item_fee: float
    small_order_fee: float
    service_fee: float
    rush_fee: float
    subtotal: float
    tip: float
    total_price: float

    # Driver earnings
    driver_base_pay: float
    driver_distance_pay: float
    driver_time_pay: float
    driver_size_bonus: float
    driver_tip: float
    driver_total_earning: float

    # Company revenue
    company_service_fee: float
    company_base_fee_share: float
    company_distance_fee_share: float
    company_time_fee_share: float
    company_total_revenue: float


class ValidationResult(BaseModel):
    """Outcome of the conservation check on a breakdown."""

    is_valid: bool
    difference: float = Field(ge=0)
    explanation: str


class DriverPayout(BaseModel):
    """Money movement for a settled order."""

    order_id: str
    driver_id: str
    customer_total: float = Field(ge=0)
    driver_amount: float = Field(ge=0)
    driver_tip: float = Field(ge=0)
    company_amount: float
    timestamp: str
