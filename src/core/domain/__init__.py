"""
Domain models and value objects.

Contains the week-numbering value objects: Weekday, WeekPolicy, WeekIdentity.
"""

from src.core.domain.week_identity import WeekIdentity
from src.core.domain.week_policy import ISO_POLICY, US_POLICY, Weekday, WeekPolicy

__all__ = [
    # Policy
    "Weekday",
    "WeekPolicy",
    "ISO_POLICY",
    "US_POLICY",
    # Identity
    "WeekIdentity",
]
