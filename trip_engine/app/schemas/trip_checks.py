"""
Trip check API schemas.

Request and response models for the /trip-checks endpoints.
"""

from pydantic import BaseModel, Field, model_validator
from datetime import datetime
from typing import Dict, List, Optional

from trip_engine.app.models.trip_enums import ArrivalTarget, TripStatus, WindowKind
from trip_engine.app.schemas.decisions import PriceBreakdown
from trip_engine.app.schemas.geo import Coordinate
from trip_engine.app.schemas.trip import BusyInterval, DateRange, ensure_same_timezone_awareness


class DistanceRequest(BaseModel):
    a: Coordinate
    b: Coordinate


class DistanceResponse(BaseModel):
    distance_km: float


class StartCheckRequest(BaseModel):
    """Schema for checking whether a trip may start."""
    scheduled_start: datetime
    now: Optional[datetime] = Field(None, description="Defaults to server time")
    
    @model_validator(mode="after")
    def validate_timezones(self):
        ensure_same_timezone_awareness(self.scheduled_start, self.now)
        return self


class StartCheckResponse(BaseModel):
    kind: WindowKind
    delta_minutes: float
    message: Optional[str]
    can_proceed: bool
    requires_confirmation: bool


class ExpectedArrival(BaseModel):
    coordinate: Optional[Coordinate] = None
    arrival_time: Optional[datetime] = None


class ObservedArrival(BaseModel):
    coordinate: Optional[Coordinate] = Field(None, description="Omit when geolocation is unavailable")
    time: Optional[datetime] = Field(None, description="Defaults to server time")


class ArrivalCheckRequest(BaseModel):
    """Schema for validating arrival at a stop or the destination."""
    expected: ExpectedArrival
    observed: ObservedArrival
    target: ArrivalTarget = ArrivalTarget.STOP
    
    @model_validator(mode="after")
    def validate_timezones(self):
        ensure_same_timezone_awareness(self.expected.arrival_time, self.observed.time)
        return self


class ArrivalCheckResponse(BaseModel):
    mismatches: List[str]
    requires_confirmation: bool


class ScheduleWindowRequest(BaseModel):
    route_duration_min: float = Field(..., ge=0)
    stop_count: int = Field(0, ge=0)
    is_two_way: bool = False
    scheduled_start: datetime
    scheduled_end: datetime
    
    @model_validator(mode="after")
    def validate_timezones(self):
        ensure_same_timezone_awareness(self.scheduled_start, self.scheduled_end)
        return self


class ScheduleWindowResponse(BaseModel):
    required_min: float
    required_display: str
    ok: bool
    shortfall_min: float


class PricingRequest(BaseModel):
    distance_km: float = Field(..., ge=0)
    amount_per_km: float = Field(..., ge=0)
    vehicle_rent: float = Field(0, ge=0)
    is_two_way: bool = False


PricingResponse = PriceBreakdown


class AvailabilityRequest(BaseModel):
    candidate: DateRange
    busy: List[BusyInterval] = []
    
    @model_validator(mode="after")
    def validate_timezones(self):
        ensure_same_timezone_awareness(
            self.candidate.start,
            *(moment for interval in self.busy for moment in (interval.start, interval.end)),
        )
        return self


class AvailabilityResponse(BaseModel):
    conflict: bool
    matches: List[BusyInterval]
    vehicle_conflict: bool
    driver_conflict: bool


class TransitionRequest(BaseModel):
    current: TripStatus
    target: TripStatus


class TransitionResponse(BaseModel):
    status: TripStatus


class ScheduleRequest(BaseModel):
    start: datetime
    end: datetime
    now: Optional[datetime] = None
    allow_past_start: bool = False
    
    @model_validator(mode="after")
    def validate_timezones(self):
        ensure_same_timezone_awareness(self.start, self.end, self.now)
        return self


class ScheduleResponse(BaseModel):
    valid: bool
    errors: Dict[str, str]
