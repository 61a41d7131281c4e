"""
Trip pricing.

total = amount_per_km * distance_km * (2 if two-way else 1) + vehicle_rent

Rounding and currency display are left to the caller.
"""

from trip_engine.app.core.exceptions import InvalidInputError
from trip_engine.app.schemas.decisions import PriceBreakdown


def _require_non_negative(**values: float) -> None:
    for field, value in values.items():
        if value < 0:
            raise InvalidInputError(field, value, "must be >= 0")


def price_breakdown(
    distance_km: float,
    amount_per_km: float,
    vehicle_rent: float = 0,
    is_two_way: bool = False
) -> PriceBreakdown:
    _require_non_negative(distance_km=distance_km, amount_per_km=amount_per_km, vehicle_rent=vehicle_rent)
    
    billable_distance = distance_km * (2 if is_two_way else 1)
    distance_charge = amount_per_km * billable_distance
    
    return PriceBreakdown(
        billable_distance_km=billable_distance,
        distance_charge=distance_charge,
        vehicle_rent=vehicle_rent,
        total=distance_charge + vehicle_rent
    )


def total(distance_km: float, amount_per_km: float, vehicle_rent: float = 0, is_two_way: bool = False) -> float:
    """Total trip price."""
    return price_breakdown(distance_km, amount_per_km, vehicle_rent, is_two_way).total
