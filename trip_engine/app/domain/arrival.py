"""
Stop / destination arrival validation.

Compares where and when the driver is against where and when the trip
expects them. Each check contributes at most one reason:

1. Location: more than ``arrival_radius_km`` from the target.
2. Time: more than ``arrival_tolerance_minutes`` from the expected time.

A missing observed coordinate (geolocation unavailable) skips the
location check; it is never reported as a mismatch.
"""

import logging
from datetime import datetime
from typing import Optional

from trip_engine.app.core.config import settings
from trip_engine.app.domain.geo import distance_km
from trip_engine.app.domain.time_window import minutes_between
from trip_engine.app.models.trip_enums import ArrivalTarget
from trip_engine.app.schemas.decisions import MismatchReport
from trip_engine.app.schemas.geo import Coordinate
from trip_engine.app.schemas.trip import Trip, TripLeg

logger = logging.getLogger("trip_engine.arrival")

TIME_FORMAT = "%H:%M"


def _time_reason(target: ArrivalTarget, expected: datetime, observed: datetime, delta: float) -> str:
    expected_text = expected.strftime(TIME_FORMAT)
    if expected.utcoffset() is not None and observed.utcoffset() is not None:
        # Show both times on the expected leg's clock
        observed = observed.astimezone(expected.tzinfo)
    if target == ArrivalTarget.STOP:
        return f"Time mismatch: Expected arrival at {expected_text}, current time is {observed.strftime(TIME_FORMAT)}."
    if delta < 0:
        return f"Time mismatch: Trip is scheduled to end at {expected_text}, but you're ending early."
    return f"Time mismatch: Trip was scheduled to end at {expected_text}."


def validate_arrival(
    expected_coordinate: Optional[Coordinate],
    observed_time: datetime,
    observed_coordinate: Optional[Coordinate] = None,
    expected_time: Optional[datetime] = None,
    target: ArrivalTarget = ArrivalTarget.STOP,
    radius_km: Optional[float] = None,
    tolerance_minutes: Optional[float] = None
) -> MismatchReport:
    """
    Build a mismatch report for an arrival claim.
    
    Args:
        expected_coordinate: Where the stop / destination is
        observed_time: When the driver reports arrival
        observed_coordinate: Device location, None when unavailable
        expected_time: Planned arrival time, None when the leg has none
        target: Stop or trip destination (changes wording)
        radius_km: Location tolerance, defaults to settings
        tolerance_minutes: Time tolerance, defaults to settings
    
    Returns:
        Report whose reasons are in check order; empty means no mismatch.
    """
    radius_km = settings.arrival_radius_km if radius_km is None else radius_km
    tolerance_minutes = settings.arrival_tolerance_minutes if tolerance_minutes is None else tolerance_minutes
    target = ArrivalTarget(target)
    reasons = []
    
    if expected_coordinate is not None and observed_coordinate is not None:
        distance = distance_km(expected_coordinate, observed_coordinate)
        if distance > radius_km:
            reasons.append(f"Location mismatch: you are {distance:.2f}km away from the {target.value}.")
    elif observed_coordinate is None:
        logger.debug("No device location, skipping %s location check", target.value)
    
    if expected_time is not None:
        delta = minutes_between(expected_time, observed_time)
        if abs(delta) > tolerance_minutes:
            reasons.append(_time_reason(target, expected_time, observed_time, delta))
    
    if reasons:
        logger.info("Arrival mismatch", extra={"target": target.value, "reasons": reasons})
    
    return MismatchReport(reasons=reasons)


def validate_stop_arrival(
    leg: TripLeg,
    observed_time: datetime,
    observed_coordinate: Optional[Coordinate] = None
) -> MismatchReport:
    """Validate arrival at an intermediate stop."""
    return validate_arrival(
        expected_coordinate=leg.point.coordinate,
        observed_time=observed_time,
        observed_coordinate=observed_coordinate,
        expected_time=leg.arrival_time,
        target=ArrivalTarget.STOP
    )


def validate_trip_end(
    trip: Trip,
    observed_time: datetime,
    observed_coordinate: Optional[Coordinate] = None
) -> MismatchReport:
    """Validate ending a trip against its destination and scheduled end."""
    return validate_arrival(
        expected_coordinate=trip.end_leg.point.coordinate,
        observed_time=observed_time,
        observed_coordinate=observed_coordinate,
        expected_time=trip.scheduled_end,
        target=ArrivalTarget.DESTINATION
    )
