from .rates import SizeCategory

MEDIUM_MIN_VALUE = 25.0
LARGE_MIN_VALUE = 100.0
EXTRA_LARGE_MIN_VALUE = 300.0


def classify_item_value(item_value: float) -> SizeCategory:
    """Map a declared item value (USD) to a size category.

    Defined for every real number; negative values land in "S".
    """
    if item_value < MEDIUM_MIN_VALUE:
        return "S"
    if item_value < LARGE_MIN_VALUE:
        return "M"
    if item_value < EXTRA_LARGE_MIN_VALUE:
        return "L"
    return "XL"
