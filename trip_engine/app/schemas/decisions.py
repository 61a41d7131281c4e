"""
Engine result schemas.

Every engine call returns one of these records; none of them is an error.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from trip_engine.app.models.trip_enums import ResourceType, WindowKind
from trip_engine.app.schemas.trip import BusyInterval


class WindowDecision(BaseModel):
    """Classification of an actual time against a scheduled one."""
    kind: WindowKind
    delta_minutes: float  # actual - scheduled, positive = late
    
    @property
    def is_early(self) -> bool:
        return self.delta_minutes < 0


class StartDecision(WindowDecision):
    """Trip start gate outcome."""
    message: Optional[str] = None
    
    @property
    def can_proceed(self) -> bool:
        """True when the start may go ahead, possibly after confirmation."""
        return self.kind != WindowKind.HARD
    
    @property
    def requires_confirmation(self) -> bool:
        return self.kind == WindowKind.SOFT


class MismatchReport(BaseModel):
    """Ordered reasons why an observed state deviates from the expected one."""
    reasons: List[str] = []
    
    def __len__(self) -> int:
        return len(self.reasons)
    
    def __bool__(self) -> bool:
        return bool(self.reasons)
    
    @property
    def message(self) -> str:
        return "\n".join(self.reasons)


class WindowCheck(BaseModel):
    """Whether a schedule leaves enough time for the route."""
    ok: bool
    shortfall_min: float = Field(..., ge=0)


class PriceBreakdown(BaseModel):
    """Derived trip price."""
    billable_distance_km: float
    distance_charge: float
    vehicle_rent: float
    total: float


class ConflictResult(BaseModel):
    """Busy intervals overlapping a candidate range."""
    conflict: bool
    matches: List[BusyInterval] = []
    
    def for_resource(self, resource_type: ResourceType) -> List[BusyInterval]:
        return [interval for interval in self.matches if interval.resource_type == resource_type]
    
    @property
    def vehicle_conflicts(self) -> List[BusyInterval]:
        return self.for_resource(ResourceType.VEHICLE)
    
    @property
    def driver_conflicts(self) -> List[BusyInterval]:
        return self.for_resource(ResourceType.DRIVER)
