"""
Goal Week Index — Выборка целей по неделям

Неделя запроса задаётся смещением от текущей недели (0 = текущая, -1 = прошлая).
Цель принадлежит неделе, если её метка (week_of_year, week_year) совпадает
с WeekIdentity недели запроса. Смещение между неделями равно разности начал
недель в днях, делённой на 7 (не разности номеров недель).
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from src.core.calendar.week_numbering import (
    DAYS_PER_WEEK,
    identity_start,
    local_date,
    week_exists,
    week_identity_for_offset,
    week_start,
)
from src.core.domain.week_policy import WeekPolicy
from src.core.logger import get_logger
from src.goals.goal import Goal


logger = get_logger(__name__)

# Сколько прошлых недель показывает виджет
DEFAULT_WEEKS_BACK = 4


@dataclass(frozen=True)
class GoalMigrationResult:
    """Результат проставления меток недель."""

    goals: Tuple[Goal, ...]
    migrated_count: int


def goals_for_week(
    goals: Iterable[Goal],
    week_offset: int,
    now_ms: int,
    policy: WeekPolicy,
) -> List[Goal]:
    """
    Цели недели, отстоящей от текущей на week_offset недель.

    Непомеченные цели не попадают ни в одну неделю.

    Args:
        goals: Все цели
        week_offset: Смещение (0 = текущая неделя, -1 = прошлая)
        now_ms: Текущее время (миллисекунды)
        policy: Политика нумерации

    Returns:
        Цели недели в исходном порядке
    """
    target = week_identity_for_offset(now_ms, week_offset, policy)
    return [goal for goal in goals if goal.belongs_to(target)]


def week_offset_of(goal: Goal, now_ms: int, policy: WeekPolicy) -> int:
    """
    Смещение недели цели относительно текущей недели.

    Raises:
        ValueError: Цель не помечена неделей
    """
    identity = goal.week_identity
    if identity is None:
        raise ValueError(f"Goal {goal.id} has no week stamp")
    current_start = week_start(local_date(now_ms, policy), policy)
    return (identity_start(identity, policy) - current_start).days // DAYS_PER_WEEK


def weeks_with_goals(goals: Iterable[Goal], now_ms: int, policy: WeekPolicy) -> List[int]:
    """
    Отсортированные смещения недель, в которых есть цели.

    Текущая неделя (0) присутствует всегда. Цели с меткой недели, которой нет
    в году нумерации политики (W53 после смены политики или часового пояса),
    пропускаются, как и в goals_for_week.
    """
    offsets = {0}
    for goal in goals:
        identity = goal.week_identity
        if identity is None:
            continue
        if not week_exists(identity, policy):
            logger.warning(
                f"Goal {goal.id} skipped: week {identity.label()} does not exist under current policy"
            )
            continue
        offsets.add(week_offset_of(goal, now_ms, policy))
    return sorted(offsets)


def recent_week_goals(
    goals: Iterable[Goal],
    now_ms: int,
    policy: WeekPolicy,
    weeks_back: int = DEFAULT_WEEKS_BACK,
) -> Dict[int, List[Goal]]:
    """
    Цели текущей и weeks_back предыдущих недель.

    Returns:
        {0: [...], -1: [...], ..., -weeks_back: [...]}
    """
    if weeks_back < 0:
        raise ValueError(f"weeks_back cannot be negative: {weeks_back}")

    goals = list(goals)
    return {
        offset: goals_for_week(goals, offset, now_ms, policy)
        for offset in range(0, -weeks_back - 1, -1)
    }


def week_label(week_offset: int) -> str:
    """Человекочитаемая подпись недели по смещению"""
    if week_offset == 0:
        return "Current Week"
    if week_offset == -1:
        return "Last Week"
    if week_offset < -1:
        return f"{abs(week_offset)} Weeks Ago"
    if week_offset == 1:
        return "Next Week"
    return f"In {week_offset} Weeks"


def migrate_goal_week_data(goals: Iterable[Goal], policy: WeekPolicy) -> GoalMigrationResult:
    """
    Проставление меток недель целям, созданным без них.

    Помеченные цели не изменяются. Метка вычисляется из created_at_ms.

    Returns:
        GoalMigrationResult с обновлённым списком и числом изменённых целей
    """
    migrated: List[Goal] = []
    count = 0
    for goal in goals:
        if goal.is_week_stamped:
            migrated.append(goal)
            continue
        migrated.append(goal.stamped(policy))
        count += 1

    if count > 0:
        logger.info(f"Migrated {count} goals with week/year data")

    return GoalMigrationResult(goals=tuple(migrated), migrated_count=count)
