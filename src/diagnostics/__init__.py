"""Diagnostics — отчёты о календарных полях и стратегиях смещения недель."""

from .calendar_report import (
    CalendarFields,
    WeekOffsetComparison,
    calendar_fields,
    calendar_fields_for_date,
    compare_week_offset_strategies,
    render_report,
)

__all__ = [
    "CalendarFields",
    "WeekOffsetComparison",
    "calendar_fields",
    "calendar_fields_for_date",
    "compare_week_offset_strategies",
    "render_report",
]
