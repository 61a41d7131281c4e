"""
Trip status transitions.

scheduled -> in-progress -> completed, with cancellation allowed from
scheduled or in-progress. Completed and cancelled are terminal.
"""

import logging

from trip_engine.app.core.exceptions import InvalidStatusTransitionError
from trip_engine.app.models.trip_enums import TripStatus

logger = logging.getLogger("trip_engine.trip_lifecycle")

ALLOWED_TRANSITIONS = {
    TripStatus.SCHEDULED: {TripStatus.IN_PROGRESS, TripStatus.CANCELLED},
    TripStatus.IN_PROGRESS: {TripStatus.COMPLETED, TripStatus.CANCELLED},
    TripStatus.COMPLETED: set(),
    TripStatus.CANCELLED: set(),
}


def can_transition(current: TripStatus, target: TripStatus) -> bool:
    return TripStatus(target) in ALLOWED_TRANSITIONS[TripStatus(current)]


def ensure_transition(current: TripStatus, target: TripStatus) -> TripStatus:
    """
    Validate a status change.
    
    Returns:
        The target status
    
    Raises:
        InvalidStatusTransitionError: If the change is not allowed
    """
    current, target = TripStatus(current), TripStatus(target)
    if not can_transition(current, target):
        logger.warning("Rejected trip transition", extra={"current": current.value, "target": target.value})
        raise InvalidStatusTransitionError(current.value, target.value)
    return target
