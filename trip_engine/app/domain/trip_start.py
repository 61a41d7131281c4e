"""
Trip start gate.

Decides whether a driver may start a trip now:
- more than the hard window away from the scheduled start -> blocked
- more than the soft window away -> driver must confirm
- otherwise the trip starts immediately
"""

import logging
import math
from datetime import datetime
from typing import Optional

from trip_engine.app.core.config import settings
from trip_engine.app.domain.time_window import TimeWindowPolicy
from trip_engine.app.models.trip_enums import WindowKind
from trip_engine.app.schemas.decisions import StartDecision

logger = logging.getLogger("trip_engine.trip_start")


def split_hours_minutes(minutes: float) -> tuple[int, int]:
    """Whole hours and leftover whole minutes of an absolute duration."""
    minutes = abs(minutes)
    return math.floor(minutes / 60), math.floor(minutes % 60)


def format_hours_minutes(minutes: float) -> str:
    hours, mins = split_hours_minutes(minutes)
    return f"{hours}h {mins}m"


def format_window(minutes: float) -> str:
    """Policy window label, e.g. ``3h`` or ``2h 30m``."""
    hours, mins = split_hours_minutes(minutes)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


class TripStartGate:
    """Wraps a TimeWindowPolicy with trip start wording."""
    
    def __init__(self, soft_minutes: Optional[float] = None, hard_minutes: Optional[float] = None):
        self.policy = TimeWindowPolicy(
            settings.start_soft_window_minutes if soft_minutes is None else soft_minutes,
            settings.start_hard_window_minutes if hard_minutes is None else hard_minutes,
        )
    
    def evaluate(self, scheduled_start: datetime, now: datetime) -> StartDecision:
        decision = self.policy.classify(scheduled_start, now)
        offset = format_hours_minutes(decision.delta_minutes)
        message = None
        
        if decision.kind == WindowKind.HARD:
            window = format_window(self.policy.hard_minutes)
            if decision.is_early:
                message = f"Cannot start trip yet. It is scheduled to start in {offset}."
            else:
                message = f"Cannot start trip. It was scheduled to start {offset} ago."
            message += f" You can only start the trip within {window} of the scheduled start time."
            logger.warning(
                "Trip start blocked",
                extra={"scheduled_start": scheduled_start.isoformat(), "delta_minutes": round(decision.delta_minutes, 1)}
            )
        elif decision.kind == WindowKind.SOFT:
            if decision.is_early:
                message = f"Trip is scheduled to start in {offset}. Starting early may affect the schedule."
            else:
                message = f"Trip was scheduled to start {offset} ago. Starting late may affect the schedule."
            logger.info(
                "Trip start needs confirmation",
                extra={"scheduled_start": scheduled_start.isoformat(), "delta_minutes": round(decision.delta_minutes, 1)}
            )
        
        return StartDecision(kind=decision.kind, delta_minutes=decision.delta_minutes, message=message)


def evaluate_trip_start(scheduled_start: datetime, now: datetime) -> StartDecision:
    """Evaluate with the configured start windows."""
    return TripStartGate().evaluate(scheduled_start, now)
