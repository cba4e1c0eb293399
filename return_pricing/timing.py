BILLABLE_WINDOW_MIN = 10


def billable_minutes(actual_minutes: float, estimated_minutes: float) -> float:
    """Clamp actual trip time to within 10 minutes either side of the estimate.

    The lower bound never goes below zero.
    """
    min_time = max(estimated_minutes - BILLABLE_WINDOW_MIN, 0)
    max_time = estimated_minutes + BILLABLE_WINDOW_MIN
    return min(max(actual_minutes, min_time), max_time)


def format_duration(minutes: int) -> str:
    """Render minutes as "15 min", "2 hr" or "1 hr 15 min"."""
    if minutes < 60:
        return f"{minutes} min"

    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours} hr"
    return f"{hours} hr {mins} min"
