"""
Calendar Report — Диагностика календарных полей

Отчёт о полях даты (week_of_month, week_of_year, day_of_week) по явной политике
и сравнение двух стратегий вычисления смещения недели цели:

1. naive: goal_week - current_week (вычитание номеров недель)
2. aligned: weeks_between(now, goal) (разность начал недель)

На границе года стратегии расходятся: цель от 27.12.2025 при текущей дате
03.01.2026 (US) даёт naive = 52 - 1 = 51, aligned = -1.
Библиотека использует только aligned; naive оставлена здесь для демонстрации.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from src.core.calendar.week_numbering import (
    day_of_week,
    instant_from_date,
    local_date,
    week_identity_of,
    week_of_month,
    weeks_between,
)
from src.core.domain.week_identity import WeekIdentity
from src.core.domain.week_policy import Weekday, WeekPolicy
from src.core.logger import get_logger


logger = get_logger(__name__)


# =============================================================================
# CALENDAR FIELDS
# =============================================================================


@dataclass(frozen=True)
class CalendarFields:
    """Календарные поля одной даты."""

    day: date
    week_of_month: int
    week_of_year: int
    week_year: int
    month: int  # 1-based
    day_of_week: Weekday


def calendar_fields(instant_ms: int, policy: WeekPolicy) -> CalendarFields:
    """Календарные поля instant по политике"""
    identity = week_identity_of(instant_ms, policy)
    d = local_date(instant_ms, policy)
    return CalendarFields(
        day=d,
        week_of_month=week_of_month(instant_ms, policy),
        week_of_year=identity.week_number,
        week_year=identity.week_year,
        month=d.month,
        day_of_week=day_of_week(instant_ms, policy),
    )


def calendar_fields_for_date(year: int, month: int, day: int, policy: WeekPolicy) -> CalendarFields:
    """
    Календарные поля явной даты (месяц 1-based).

    Raises:
        InvalidCalendarDate: Несуществующая дата
    """
    return calendar_fields(instant_from_date(year, month, day, policy), policy)


def render_report(fields_list: Iterable[CalendarFields]) -> str:
    """Текстовый отчёт (формат не является стабильным интерфейсом)"""
    blocks = []
    for fields in fields_list:
        blocks.append(
            "\n".join(
                [
                    f"=== {fields.day.isoformat()} ===",
                    f"Week of Month: {fields.week_of_month}",
                    f"Week of Year: {fields.week_of_year} ({fields.week_year})",
                    f"Month: {fields.month}",
                    f"Day of Week: {fields.day_of_week.name.title()}",
                ]
            )
        )
    return "\n\n".join(blocks)


# =============================================================================
# WEEK OFFSET STRATEGIES
# =============================================================================


@dataclass(frozen=True)
class WeekOffsetComparison:
    """Сравнение стратегий смещения недели цели относительно текущей."""

    goal_week: WeekIdentity
    current_week: WeekIdentity
    naive_offset: int
    aligned_offset: int

    @property
    def strategies_agree(self) -> bool:
        return self.naive_offset == self.aligned_offset


def compare_week_offset_strategies(
    goal_created_ms: int,
    now_ms: int,
    policy: WeekPolicy,
) -> WeekOffsetComparison:
    """
    Смещение недели цели двумя способами.

    Args:
        goal_created_ms: Время создания цели (миллисекунды)
        now_ms: Текущее время (миллисекунды)
        policy: Политика нумерации

    Returns:
        WeekOffsetComparison; aligned_offset: значение, используемое библиотекой
    """
    goal_week = week_identity_of(goal_created_ms, policy)
    current_week = week_identity_of(now_ms, policy)

    comparison = WeekOffsetComparison(
        goal_week=goal_week,
        current_week=current_week,
        naive_offset=goal_week.week_number - current_week.week_number,
        aligned_offset=weeks_between(now_ms, goal_created_ms, policy),
    )

    if not comparison.strategies_agree:
        logger.warning(
            f"Week offset strategies disagree for goal week {goal_week.label()} "
            f"vs current {current_week.label()}: naive={comparison.naive_offset}, "
            f"aligned={comparison.aligned_offset}"
        )

    return comparison
