"""
Trip form schedule validation.

Mirrors the checks the create and edit forms run before submitting a trip.
Returns field -> message; an empty dict means the schedule is acceptable.
"""

import calendar
from datetime import datetime
from typing import Dict, Optional

from trip_engine.app.core.config import settings


def add_months(moment: datetime, months: int) -> datetime:
    """Same day-of-month ``months`` later, clamped to the month's last day."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def validate_schedule(
    start: datetime,
    end: datetime,
    now: datetime,
    max_advance_months: Optional[int] = None,
    allow_past_start: bool = False
) -> Dict[str, str]:
    """
    Validate a trip's start/end pair.
    
    Args:
        start: Requested start
        end: Requested end
        now: Current time
        max_advance_months: Booking horizon, defaults to settings
        allow_past_start: Skip the past-start check (editing an existing trip)
    """
    if max_advance_months is None:
        max_advance_months = settings.max_advance_booking_months
    errors = {}
    
    if not allow_past_start and start < now:
        errors["start_date_time"] = "Start date cannot be in the past"
    
    if start > add_months(now, max_advance_months):
        errors["start_date_time"] = f"Start date cannot be more than {max_advance_months} months in the future"
    
    if end <= start:
        errors["end_date_time"] = "End date must be after start date"
    
    return errors
