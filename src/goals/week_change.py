"""Week Change — детекция начала новой недели и недельный итог.

При первом запуске в новой неделе:
- все ACTIVE цели прошлой недели становятся FAILED
- формируется итог недели (active / completed / failed)
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from src.core.calendar.week_numbering import same_week, week_identity_of
from src.core.domain.week_identity import WeekIdentity
from src.core.domain.week_policy import WeekPolicy
from src.core.logger import get_logger
from src.goals.goal import Goal, GoalStatus


logger = get_logger(__name__)


@dataclass(frozen=True)
class WeekChangeResult:
    """Результат проверки смены недели."""

    week_changed: bool
    current: WeekIdentity
    previous: Optional[WeekIdentity]

    # Для отладки
    details: str


@dataclass(frozen=True)
class WeeklyWrapUp:
    """Итог завершившейся недели."""

    active_count: int
    completed_count: int
    failed_count: int
    total_goals: int

    # Цели после закрытия недели (ACTIVE → FAILED)
    goals: Tuple[Goal, ...]

    @property
    def completion_rate(self) -> float:
        """Доля выполненных целей (0.0 если целей не было)"""
        if self.total_goals == 0:
            return 0.0
        return self.completed_count / self.total_goals


class WeekChangeTracker:
    """Запоминает последнюю увиденную неделю и сообщает о её смене.

    Первая проверка (last_seen отсутствует) сменой не считается.
    """

    def __init__(self, policy: WeekPolicy, last_seen: Optional[WeekIdentity] = None):
        """
        Args:
            policy: политика нумерации недель
            last_seen: последняя записанная неделя (None при первом запуске)
        """
        self.policy = policy
        self._last_seen = last_seen

    @property
    def last_seen(self) -> Optional[WeekIdentity]:
        return self._last_seen

    def check(self, now_ms: int) -> WeekChangeResult:
        """Сравнение недели now_ms с последней записанной и запись текущей.

        Args:
            now_ms: текущее время (Unix timestamp ms)

        Returns:
            WeekChangeResult; previous: неделя, записанная до этого вызова
        """
        current = week_identity_of(now_ms, self.policy)
        previous = self._last_seen
        self._last_seen = current

        if previous is None:
            return WeekChangeResult(
                week_changed=False,
                current=current,
                previous=None,
                details=f"First check, recorded {current.label()}",
            )

        if same_week(previous, current):
            return WeekChangeResult(
                week_changed=False,
                current=current,
                previous=previous,
                details=f"Still in {current.label()}",
            )

        logger.info(f"Week changed: {previous.label()} -> {current.label()}")
        return WeekChangeResult(
            week_changed=True,
            current=current,
            previous=previous,
            details=f"Week changed from {previous.label()} to {current.label()}",
        )


def build_weekly_wrap_up(goals: Iterable[Goal]) -> WeeklyWrapUp:
    """Итог недели: незавершённые цели помечаются FAILED.

    ARCHIVED цели в итог не входят, но сохраняются в списке без изменений.
    """
    goals = tuple(goals)
    active = sum(1 for g in goals if g.status == GoalStatus.ACTIVE)
    completed = sum(1 for g in goals if g.status == GoalStatus.COMPLETED)
    failed = sum(1 for g in goals if g.status == GoalStatus.FAILED)

    closed = tuple(
        g.with_status(GoalStatus.FAILED) if g.status == GoalStatus.ACTIVE else g
        for g in goals
    )

    if active > 0:
        logger.info(f"Weekly wrap-up: marked {active} unfinished goals as failed")

    return WeeklyWrapUp(
        active_count=active,
        completed_count=completed,
        failed_count=failed + active,
        total_goals=active + completed + failed,
        goals=closed,
    )
