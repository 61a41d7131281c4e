"""
Date range conflict detection.

Overlap is closed on both ends: a candidate that ends exactly when a busy
interval starts (or vice versa) is a conflict.
"""

import logging
from datetime import date, datetime
from typing import Iterable, Union

from trip_engine.app.schemas.decisions import ConflictResult
from trip_engine.app.schemas.trip import BusyInterval, DateRange

logger = logging.getLogger("trip_engine.conflicts")


def overlaps(candidate: DateRange, interval: DateRange) -> bool:
    return candidate.start <= interval.end and candidate.end >= interval.start


def find_conflict(candidate: DateRange, busy: Iterable[BusyInterval]) -> ConflictResult:
    """Return every busy interval that overlaps the candidate range, in input order."""
    matches = [interval for interval in busy if overlaps(candidate, interval)]
    
    if matches:
        logger.info(
            "Date range conflict",
            extra={
                "candidate_start": candidate.start.isoformat(),
                "candidate_end": candidate.end.isoformat(),
                "resources": [f"{m.resource_type.value}:{m.resource_id}" for m in matches],
            }
        )
    
    return ConflictResult(conflict=bool(matches), matches=matches)


def is_day_busy(day: Union[date, datetime], busy: Iterable[BusyInterval]) -> bool:
    """True if the calendar day touches any busy interval (start and end days included)."""
    if isinstance(day, datetime):
        day = day.date()
    return any(interval.start.date() <= day <= interval.end.date() for interval in busy)
