"""
Goal — Модель недельной цели

Immutable Pydantic модель цели, помеченной неделей создания (week_of_year, week_year).
Метка недели либо задана полностью, либо отсутствует (цели, созданные до
появления меток; см. migrate_goal_week_data).

week_year — год нумерации недель, а не календарный год created_at_ms:
цель от 29.12.2025 при ISO-политике помечается 2026-W01.
"""

from enum import Enum
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from src.core.calendar.week_numbering import week_identity_of
from src.core.contracts import validate_goal
from src.core.domain.week_identity import WeekIdentity
from src.core.domain.week_policy import WeekPolicy


# =============================================================================
# ENUMS
# =============================================================================


class GoalStatus(str, Enum):
    """Статус цели"""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    ARCHIVED = "ARCHIVED"


# =============================================================================
# GOAL MODEL
# =============================================================================


class Goal(BaseModel):
    """
    Модель цели пользователя.

    Immutable модель (frozen=True). Все изменения создают новый экземпляр.
    """

    # Идентификация
    id: str = Field(default_factory=lambda: str(uuid4()), min_length=1, description="Идентификатор цели")
    text: str = Field(..., min_length=1, description="Текст цели")
    status: GoalStatus = Field(GoalStatus.ACTIVE, description="Статус цели")

    # Время и порядок
    created_at_ms: int = Field(..., ge=0, description="Время создания (UTC, миллисекунды)")
    position: int = Field(-1, ge=-1, description="Позиция в сетке (-1 = не задана)")

    # Метка недели
    week_of_year: Optional[int] = Field(None, ge=1, le=53, description="Номер недели создания")
    week_year: Optional[int] = Field(None, ge=1, le=9999, description="Год нумерации недели создания")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_week_stamp_complete(self) -> "Goal":
        """Метка недели задаётся парой целиком"""
        if (self.week_of_year is None) != (self.week_year is None):
            raise ValueError(
                f"week_of_year ({self.week_of_year}) and week_year ({self.week_year}) "
                f"must be set together"
            )
        return self

    @classmethod
    def create(
        cls,
        text: str,
        created_at_ms: int,
        policy: WeekPolicy,
        status: GoalStatus = GoalStatus.ACTIVE,
        position: int = -1,
    ) -> "Goal":
        """
        Новая цель с меткой недели, вычисленной из created_at_ms.

        Args:
            text: Текст цели
            created_at_ms: Время создания (миллисекунды)
            policy: Политика нумерации недель
            status: Начальный статус
            position: Позиция в сетке

        Returns:
            Goal с заполненными week_of_year / week_year
        """
        identity = week_identity_of(created_at_ms, policy)
        return cls(
            text=text,
            status=status,
            created_at_ms=created_at_ms,
            position=position,
            week_of_year=identity.week_number,
            week_year=identity.week_year,
        )

    @property
    def is_week_stamped(self) -> bool:
        return self.week_of_year is not None

    @property
    def week_identity(self) -> Optional[WeekIdentity]:
        """Неделя создания или None для непомеченных целей"""
        if self.week_of_year is None or self.week_year is None:
            return None
        return WeekIdentity(week_number=self.week_of_year, week_year=self.week_year)

    def stamped(self, policy: WeekPolicy) -> "Goal":
        """Копия с меткой недели, пересчитанной из created_at_ms"""
        identity = week_identity_of(self.created_at_ms, policy)
        return self.model_copy(
            update={"week_of_year": identity.week_number, "week_year": identity.week_year}
        )

    def with_status(self, status: GoalStatus) -> "Goal":
        return self.model_copy(update={"status": status})

    def belongs_to(self, identity: WeekIdentity) -> bool:
        """True если цель помечена неделей identity"""
        return self.week_of_year == identity.week_number and self.week_year == identity.week_year


# =============================================================================
# RECORDS
# =============================================================================


def goal_to_record(goal: Goal) -> Dict[str, Any]:
    """Goal → dict, соответствующий контракту goal.json"""
    return goal.model_dump(mode="json")


def goal_from_record(record: Dict[str, Any]) -> Goal:
    """
    dict → Goal с проверкой контракта goal.json.

    Raises:
        jsonschema.ValidationError: Запись не соответствует контракту
        pydantic.ValidationError: Запись нарушает инварианты модели
    """
    validate_goal(record)
    return Goal.model_validate(record)
