"""
Trip duration estimation.

Formats route durations for display and checks that a chosen schedule
leaves room for the route plus a fixed overhead at every stop.
"""

import logging
import math
from datetime import datetime
from typing import Optional

from trip_engine.app.core.config import settings
from trip_engine.app.core.exceptions import InvalidInputError
from trip_engine.app.domain.time_window import minutes_between
from trip_engine.app.schemas.decisions import WindowCheck

logger = logging.getLogger("trip_engine.duration")

MINUTES_PER_DAY = 24 * 60


def format_duration(total_minutes: Optional[float]) -> str:
    """
    Human readable duration, e.g. ``2 days, 3 hrs, 5 min``.
    
    Zero units are omitted and the value is floored to whole minutes.
    """
    if not total_minutes or total_minutes <= 0:
        return "0 min"
    
    days = math.floor(total_minutes / MINUTES_PER_DAY)
    hours = math.floor((total_minutes % MINUTES_PER_DAY) / 60)
    mins = math.floor(total_minutes % 60)
    
    parts = []
    if days > 0:
        parts.append(f"{days} day{'s' if days > 1 else ''}")
    if hours > 0:
        parts.append(f"{hours} hr{'s' if hours > 1 else ''}")
    if mins > 0:
        parts.append(f"{mins} min")
    
    return ", ".join(parts) or "0 min"


def required_window(
    route_duration_min: float,
    stop_count: int,
    per_stop_overhead_min: Optional[float] = None,
    is_two_way: bool = False
) -> float:
    """Minutes a trip needs: driving time (doubled when two-way) plus per-stop overhead."""
    if per_stop_overhead_min is None:
        per_stop_overhead_min = settings.per_stop_overhead_minutes
    if route_duration_min < 0:
        raise InvalidInputError("route_duration_min", route_duration_min, "must be >= 0")
    if stop_count < 0:
        raise InvalidInputError("stop_count", stop_count, "must be >= 0")
    
    driving = route_duration_min * (2 if is_two_way else 1)
    return driving + stop_count * per_stop_overhead_min


def check_window(scheduled_start: datetime, scheduled_end: datetime, total_required_min: float) -> WindowCheck:
    """Compare the scheduled span with the time the trip needs."""
    available = minutes_between(scheduled_start, scheduled_end)
    shortfall = max(0, total_required_min - available)
    
    if shortfall:
        logger.info(
            "Schedule too short",
            extra={"required_min": total_required_min, "available_min": available, "shortfall_min": shortfall}
        )
    
    return WindowCheck(ok=shortfall == 0, shortfall_min=shortfall)
