"""Goals — недельные цели, помеченные неделей создания.

- Goal / GoalStatus: immutable модель цели
- выборка целей по смещению недели, миграция меток недель
- детекция смены недели и недельный итог
"""

from .goal import Goal, GoalStatus, goal_from_record, goal_to_record
from .week_change import (
    WeekChangeResult,
    WeekChangeTracker,
    WeeklyWrapUp,
    build_weekly_wrap_up,
)
from .week_index import (
    DEFAULT_WEEKS_BACK,
    GoalMigrationResult,
    goals_for_week,
    migrate_goal_week_data,
    recent_week_goals,
    week_label,
    week_offset_of,
    weeks_with_goals,
)

__all__ = [
    # Model
    "Goal",
    "GoalStatus",
    "goal_from_record",
    "goal_to_record",
    # Week index
    "DEFAULT_WEEKS_BACK",
    "GoalMigrationResult",
    "goals_for_week",
    "migrate_goal_week_data",
    "recent_week_goals",
    "week_label",
    "week_offset_of",
    "weeks_with_goals",
    # Week change
    "WeekChangeResult",
    "WeekChangeTracker",
    "WeeklyWrapUp",
    "build_weekly_wrap_up",
]
