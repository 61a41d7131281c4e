"""
Time window policy.

Classifies an actual time against a scheduled one into on-time,
tolerable (needs confirmation) or blocked.
"""

import logging
from datetime import datetime

from trip_engine.app.core.exceptions import InvalidTimeWindowError
from trip_engine.app.models.trip_enums import WindowKind
from trip_engine.app.schemas.decisions import WindowDecision

logger = logging.getLogger("trip_engine.time_window")


def minutes_between(scheduled: datetime, actual: datetime) -> float:
    """Signed minutes from scheduled to actual (positive = late)."""
    return (actual - scheduled).total_seconds() / 60


class TimeWindowPolicy:
    """
    Soft/hard tolerance bands around a scheduled time.
    
    |delta| <= soft        -> ONTIME
    soft < |delta| <= hard -> SOFT
    |delta| > hard         -> HARD
    """
    
    def __init__(self, soft_minutes: float, hard_minutes: float):
        if soft_minutes < 0 or hard_minutes < 0 or soft_minutes > hard_minutes:
            raise InvalidTimeWindowError(soft_minutes, hard_minutes)
        self.soft_minutes = soft_minutes
        self.hard_minutes = hard_minutes
    
    def __repr__(self) -> str:
        return f"TimeWindowPolicy(soft_minutes={self.soft_minutes}, hard_minutes={self.hard_minutes})"
    
    def classify(self, scheduled: datetime, actual: datetime) -> WindowDecision:
        delta = minutes_between(scheduled, actual)
        distance = abs(delta)
        
        if distance > self.hard_minutes:
            kind = WindowKind.HARD
        elif distance > self.soft_minutes:
            kind = WindowKind.SOFT
        else:
            kind = WindowKind.ONTIME
        
        logger.debug("Classified %.1f min deviation as %s", delta, kind.value)
        return WindowDecision(kind=kind, delta_minutes=delta)


def classify(
    scheduled: datetime,
    actual: datetime,
    soft_minutes: float,
    hard_minutes: float
) -> WindowDecision:
    """One-shot classification without keeping a policy around."""
    return TimeWindowPolicy(soft_minutes, hard_minutes).classify(scheduled, actual)
