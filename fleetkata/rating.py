"""Driver rating kata — one threshold on late deliveries."""

from __future__ import annotations

NAME = "rating"
DESCRIPTION = "Rate a driver 1 or 2 from their number of late deliveries"

# Strictly more than this many late deliveries earns the higher rating.
LATE_DELIVERY_THRESHOLD = 5


def rating(driver) -> int:
    """Return 2 if the driver has more than five late deliveries, else 1.

    No validation: a driver without ``number_of_late_deliveries`` raises
    AttributeError, and a value not comparable with an int raises TypeError.
    """
    return 2 if driver.number_of_late_deliveries > LATE_DELIVERY_THRESHOLD else 1
