"""
Trip-related enumerations.
"""

import enum


class TripType(str, enum.Enum):
    """Trip type enumeration."""
    COMMERCIAL = "commercial"  # Goods / freight
    PASSENGER = "passenger"  # People transport


class TripStatus(str, enum.Enum):
    """Trip status enumeration."""
    SCHEDULED = "scheduled"  # Created, driver has not started
    IN_PROGRESS = "in-progress"  # Driver has started
    COMPLETED = "completed"  # Driver ended the trip
    CANCELLED = "cancelled"  # Trip cancelled


class LegStatus(str, enum.Enum):
    """Trip leg (start, stop, end) status enumeration."""
    PENDING = "pending"  # Not yet visited
    REACHED = "reached"  # Driver arrived
    DEPARTED = "departed"  # Driver left


class ResourceType(str, enum.Enum):
    """Resource that can be booked by a trip."""
    VEHICLE = "vehicle"
    DRIVER = "driver"


class WindowKind(str, enum.Enum):
    """Outcome of comparing an actual time with a scheduled one."""
    ONTIME = "ontime"  # Within soft window, proceed
    SOFT = "soft"  # Outside soft window, needs confirmation
    HARD = "hard"  # Outside hard window, blocked


class ArrivalTarget(str, enum.Enum):
    """What the driver claims to have reached."""
    STOP = "stop"
    DESTINATION = "destination"
