"""
Trip schemas.

Plain records consumed by the engine. The engine never mutates them.
"""

from pydantic import BaseModel, Field, model_validator
from datetime import datetime
from typing import List, Optional

from trip_engine.app.models.trip_enums import TripType, TripStatus, LegStatus, ResourceType
from trip_engine.app.schemas.geo import GeoPoint


def ensure_same_timezone_awareness(*values: Optional[datetime]) -> None:
    """
    Reject a mix of timezone-aware and naive timestamps.
    
    Raises:
        ValueError: If some values carry an offset and others do not
    """
    kinds = {value.utcoffset() is not None for value in values if value is not None}
    if len(kinds) > 1:
        raise ValueError("timestamps must all include a timezone offset or all omit it")


class TripLeg(BaseModel):
    """One point of a trip: start, an intermediate stop, or end."""
    point: GeoPoint
    arrival_time: Optional[datetime] = None
    departure_time: Optional[datetime] = None
    status: LegStatus = LegStatus.PENDING


class DateRange(BaseModel):
    """Closed interval [start, end]."""
    start: datetime
    end: datetime
    
    @model_validator(mode="after")
    def validate_order(self):
        ensure_same_timezone_awareness(self.start, self.end)
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self


class BusyInterval(DateRange):
    """Time during which a vehicle or driver is committed to another trip."""
    resource_type: ResourceType
    resource_id: str
    trip_id: Optional[str] = None


class Trip(BaseModel):
    """Schema for a trip as handed to the engine."""
    id: str
    trip_type: TripType
    status: TripStatus = TripStatus.SCHEDULED
    start_leg: TripLeg
    stops: List[TripLeg] = []
    end_leg: TripLeg
    scheduled_start: datetime
    scheduled_end: datetime
    distance_km: float = Field(0, ge=0)
    duration_min: float = Field(0, ge=0)
    amount_per_km: float = Field(0, ge=0)
    vehicle_rent: float = Field(0, ge=0)
    is_two_way: bool = False
    total_amount: Optional[float] = Field(None, ge=0)
    
    @model_validator(mode="after")
    def validate_schedule(self):
        ensure_same_timezone_awareness(
            self.scheduled_start,
            self.scheduled_end,
            *(leg.arrival_time for leg in [self.start_leg, *self.stops, self.end_leg]),
        )
        if self.scheduled_end <= self.scheduled_start:
            raise ValueError("scheduled_end must be after scheduled_start")
        return self
