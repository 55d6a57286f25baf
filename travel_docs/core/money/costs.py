"""
Cost Accumulator — trip pricing

Turns the rate/quantity inputs of a chartered trip into per-category
subtotals and a grand total:

    daily_subtotal = days        × daily_rate        (vehicle per day)
    km_subtotal    = distance_km × per_km_rate
    guide_subtotal = days        × guide_daily_rate
    total          = daily_subtotal + km_subtotal + guide_subtotal

DEFAULTING POLICY:
    A missing, unparseable, negative or non-finite input counts as 0. This is
    how a trip priced only by the day (no per-km rate) or without a guide is
    expressed. It is logged, never raised.

CRITICAL INVARIANTS:
1. accumulate never raises
2. Every field of CostBreakdown is >= 0 and quantized to cents
3. total == daily_subtotal + km_subtotal + guide_subtotal exactly
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from travel_docs.core.amounts import ZERO, parse_decimal, quantize_cents
from travel_docs.core.dates import parse_date
from travel_docs.core.domain.entities import Trip

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CostBreakdown:
    """Subtotals and total of a trip, all in reais."""

    daily_subtotal: Decimal
    km_subtotal: Decimal
    guide_subtotal: Decimal
    total: Decimal

    @classmethod
    def zero(cls) -> "CostBreakdown":
        return cls(ZERO, ZERO, ZERO, ZERO)


# =============================================================================
# INPUT SANITIZATION
# =============================================================================


def coerce_non_negative(value: object, name: str = "value") -> Decimal:
    """
    Sanitize one accumulator input.

    Returns:
        The parsed value, or Decimal 0 for missing/unparseable/negative input
    """
    parsed = parse_decimal(value)

    if parsed is None:
        if value is not None and value != "":
            logger.warning("Unparseable %s %r counted as 0", name, value)
        else:
            logger.debug("Missing %s counted as 0", name)
        return Decimal(0)

    if parsed < 0:
        logger.warning("Negative %s %s counted as 0", name, parsed)
        return Decimal(0)

    return parsed


# =============================================================================
# ACCUMULATION
# =============================================================================


def accumulate(
    days: object = None,
    distance_km: object = None,
    daily_rate: object = None,
    per_km_rate: object = None,
    guide_daily_rate: object = None,
) -> CostBreakdown:
    """
    Compute the cost breakdown of a trip.

    Args:
        days: Number of trip days
        distance_km: Total distance in km
        daily_rate: Vehicle rate per day (R$)
        per_km_rate: Rate per km (R$)
        guide_daily_rate: Guide rate per day (R$)

    Returns:
        CostBreakdown

    Examples:
        >>> accumulate(5, 200, 500, 2, 150).total
        Decimal('3650.00')
        >>> accumulate(5, 200, 500).km_subtotal
        Decimal('0.00')
    """
    days_d = coerce_non_negative(days, "days")
    km_d = coerce_non_negative(distance_km, "distance_km")

    daily = quantize_cents(days_d * coerce_non_negative(daily_rate, "daily_rate"))
    per_km = quantize_cents(km_d * coerce_non_negative(per_km_rate, "per_km_rate"))
    guide = quantize_cents(days_d * coerce_non_negative(guide_daily_rate, "guide_daily_rate"))

    return CostBreakdown(
        daily_subtotal=daily,
        km_subtotal=per_km,
        guide_subtotal=guide,
        total=daily + per_km + guide,
    )


# =============================================================================
# DAY COUNT
# =============================================================================


def inclusive_day_count(start_date: object, end_date: object) -> Optional[int]:
    """
    Trip length counting both the departure and the return day.

    count = |end - start| in whole days + 1

    Returns:
        Day count, or None when either date is absent/unparseable (the count
        is then supplied externally)

    Examples:
        >>> inclusive_day_count("2024-01-10", "2024-01-15")
        6
        >>> inclusive_day_count("2024-01-10", None) is None
        True
    """
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        return None
    return abs((end - start).days) + 1


def resolve_day_count(trip: Trip) -> int:
    """
    Day count for pricing a trip.

    Order of preference:
    1. computed from departure/return dates
    2. the trip's externally supplied day_count (negative counts as 0)
    3. 0
    """
    computed = inclusive_day_count(trip.departure_date, trip.return_date)
    if computed is not None:
        return computed
    if trip.day_count is not None:
        if trip.day_count < 0:
            logger.warning("Trip %s has negative day count %s; using 0", trip.id, trip.day_count)
            return 0
        return trip.day_count
    logger.debug("Trip %s has no dates and no day count; pricing with 0 days", trip.id)
    return 0


def accumulate_trip(trip: Trip, days: Optional[int] = None) -> CostBreakdown:
    """
    Cost breakdown from the rates stored on a trip.

    Args:
        trip: Trip with optional distance and rates
        days: Override for the day count (default: resolve_day_count(trip))
    """
    if days is None:
        days = resolve_day_count(trip)
    return accumulate(
        days=days,
        distance_km=trip.distance_km,
        daily_rate=trip.daily_rate,
        per_km_rate=trip.per_km_rate,
        guide_daily_rate=trip.guide_daily_rate,
    )
