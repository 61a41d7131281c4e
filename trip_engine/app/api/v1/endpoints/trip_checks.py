"""
Trip Check API Endpoints.

Each endpoint is a direct call into one engine function. Nothing is stored.
Blocked starts, mismatches and conflicts come back as 200 responses; only
malformed input is an error.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from trip_engine.app.domain import arrival, conflicts, duration, pricing, trip_lifecycle, trip_schedule
from trip_engine.app.domain.geo import distance_km
from trip_engine.app.domain.trip_start import evaluate_trip_start
from trip_engine.app.schemas.trip_checks import (
    DistanceRequest, DistanceResponse,
    StartCheckRequest, StartCheckResponse,
    ArrivalCheckRequest, ArrivalCheckResponse,
    ScheduleWindowRequest, ScheduleWindowResponse,
    PricingRequest, PricingResponse,
    AvailabilityRequest, AvailabilityResponse,
    TransitionRequest, TransitionResponse,
    ScheduleRequest, ScheduleResponse,
)

router = APIRouter(prefix="/trip-checks", tags=["Trip Checks"])


def _now_like(reference: datetime) -> datetime:
    """Server time, aware or naive to match the client's timestamps."""
    if reference.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


@router.post("/distance", response_model=DistanceResponse)
async def check_distance(payload: DistanceRequest):
    """Great-circle distance between two coordinates."""
    return DistanceResponse(distance_km=distance_km(payload.a, payload.b))


@router.post("/start", response_model=StartCheckResponse)
async def check_trip_start(payload: StartCheckRequest):
    """
    Decide whether a trip may start now.
    
    - ``hard``: refuse, show message without a proceed option
    - ``soft``: ask the driver to confirm
    - ``ontime``: start immediately
    """
    now = payload.now or _now_like(payload.scheduled_start)
    decision = evaluate_trip_start(payload.scheduled_start, now)
    
    return StartCheckResponse(
        kind=decision.kind,
        delta_minutes=decision.delta_minutes,
        message=decision.message,
        can_proceed=decision.can_proceed,
        requires_confirmation=decision.requires_confirmation
    )


@router.post("/arrival", response_model=ArrivalCheckResponse)
async def check_arrival(payload: ArrivalCheckRequest):
    """Validate arrival at a stop or at the trip destination."""
    observed_time = payload.observed.time
    if observed_time is None:
        reference = payload.expected.arrival_time
        observed_time = _now_like(reference) if reference else datetime.now(timezone.utc)
    
    report = arrival.validate_arrival(
        expected_coordinate=payload.expected.coordinate,
        observed_time=observed_time,
        observed_coordinate=payload.observed.coordinate,
        expected_time=payload.expected.arrival_time,
        target=payload.target
    )
    
    return ArrivalCheckResponse(mismatches=report.reasons, requires_confirmation=bool(report))


@router.post("/schedule-window", response_model=ScheduleWindowResponse)
async def check_schedule_window(payload: ScheduleWindowRequest):
    """Check a start/end pair leaves room for the route and its stops."""
    required = duration.required_window(
        payload.route_duration_min,
        payload.stop_count,
        is_two_way=payload.is_two_way
    )
    window = duration.check_window(payload.scheduled_start, payload.scheduled_end, required)
    
    return ScheduleWindowResponse(
        required_min=required,
        required_display=duration.format_duration(required),
        ok=window.ok,
        shortfall_min=window.shortfall_min
    )


@router.post("/pricing", response_model=PricingResponse)
async def quote_price(payload: PricingRequest):
    """Price breakdown for a trip."""
    return pricing.price_breakdown(
        payload.distance_km,
        payload.amount_per_km,
        payload.vehicle_rent,
        payload.is_two_way
    )


@router.post("/availability", response_model=AvailabilityResponse)
async def check_availability(payload: AvailabilityRequest):
    """Report busy intervals that overlap the candidate range."""
    result = conflicts.find_conflict(payload.candidate, payload.busy)
    
    return AvailabilityResponse(
        conflict=result.conflict,
        matches=result.matches,
        vehicle_conflict=bool(result.vehicle_conflicts),
        driver_conflict=bool(result.driver_conflicts)
    )


@router.post("/transition", response_model=TransitionResponse)
async def check_transition(payload: TransitionRequest):
    """Validate a trip status change. Illegal changes return 409."""
    return TransitionResponse(status=trip_lifecycle.ensure_transition(payload.current, payload.target))


@router.post("/schedule", response_model=ScheduleResponse)
async def check_schedule(payload: ScheduleRequest):
    """Run the trip form's date checks."""
    now = payload.now or _now_like(payload.start)
    errors = trip_schedule.validate_schedule(
        payload.start,
        payload.end,
        now,
        allow_past_start=payload.allow_past_start
    )
    return ScheduleResponse(valid=not errors, errors=errors)
