"""
Calendar primitives для weekid

Чистые функции нумерации недель по явной WeekPolicy.
"""

from src.core.calendar.week_numbering import (
    # Constants
    DAYS_PER_WEEK,
    MILLIS_PER_DAY,
    MILLIS_PER_WEEK,
    MAX_WEEK_YEAR,
    # Exceptions
    InvalidCalendarDate,
    # Instant <-> local date
    date_to_instant,
    instant_from_date,
    local_date,
    local_datetime,
    # Week boundaries
    days_from_week_start,
    first_week_start,
    identity_start,
    week_bounds,
    week_end,
    week_exists,
    week_start,
    weeks_in_year,
    # Week identity
    offset_weeks,
    same_week,
    week_identity_for_offset,
    week_identity_of,
    week_identity_of_date,
    weeks_between,
    # Calendar fields
    day_of_week,
    day_of_week_index,
    week_of_month,
)

__all__ = [
    # Constants
    "DAYS_PER_WEEK",
    "MILLIS_PER_DAY",
    "MILLIS_PER_WEEK",
    "MAX_WEEK_YEAR",
    # Exceptions
    "InvalidCalendarDate",
    # Instant <-> local date
    "date_to_instant",
    "instant_from_date",
    "local_date",
    "local_datetime",
    # Week boundaries
    "days_from_week_start",
    "first_week_start",
    "identity_start",
    "week_bounds",
    "week_end",
    "week_exists",
    "week_start",
    "weeks_in_year",
    # Week identity
    "offset_weeks",
    "same_week",
    "week_identity_for_offset",
    "week_identity_of",
    "week_identity_of_date",
    "weeks_between",
    # Calendar fields
    "day_of_week",
    "day_of_week_index",
    "week_of_month",
]
