"""
WeekPolicy — Политика нумерации недель

Явная замена неявных locale-настроек календаря. Политика фиксирует:
- first_day_of_week: день, с которого начинается неделя (ISO: понедельник, US: воскресенье)
- minimal_days_in_first_week: сколько дней недели должно попасть в новый год,
  чтобы она считалась неделей 1 (ISO: 4, US: 1)
- tz_name: часовой пояс, в котором instant читается как календарная дата

Immutable Pydantic модель: одна и та же политика всегда даёт одинаковую нумерацию.
"""

from enum import Enum
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(int, Enum):
    """День недели (нумерация ISO: понедельник = 1, воскресенье = 7)"""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """
        Разбор имени дня недели ('monday', 'Mon', 'SUNDAY').

        Raises:
            ValueError: Если имя не соответствует ни одному дню
        """
        key = name.strip().upper()
        for day in cls:
            if day.name == key or day.name[:3] == key:
                return day
        raise ValueError(f"Unknown weekday name: {name!r}")


# =============================================================================
# POLICY MODEL
# =============================================================================


class WeekPolicy(BaseModel):
    """
    Политика нумерации недель.

    Неделя 1 года Y — первая неделя политики, в которой не меньше
    minimal_days_in_first_week дней принадлежат году Y. Дни до неё относятся
    к последней неделе года Y-1, дни начиная с недели 1 года Y+1 — к году Y+1.
    """

    first_day_of_week: Weekday = Field(..., description="Первый день недели")
    minimal_days_in_first_week: int = Field(
        ..., ge=1, le=7, description="Минимум дней недели 1, попадающих в новый год"
    )
    tz_name: str = Field("UTC", min_length=1, description="IANA часовой пояс (например, 'Asia/Ho_Chi_Minh')")

    model_config = {"frozen": True}  # Immutable

    @field_validator("tz_name")
    @classmethod
    def validate_tz_name(cls, v: str) -> str:
        """Часовой пояс должен существовать в базе IANA"""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v!r}") from e
        return v

    def zone(self) -> ZoneInfo:
        """Часовой пояс политики"""
        return ZoneInfo(self.tz_name)

    def with_zone(self, tz_name: str) -> "WeekPolicy":
        """Та же нумерация в другом часовом поясе"""
        return WeekPolicy(
            first_day_of_week=self.first_day_of_week,
            minimal_days_in_first_week=self.minimal_days_in_first_week,
            tz_name=tz_name,
        )


# =============================================================================
# PRESETS
# =============================================================================

# ISO 8601: понедельник, неделя 1 содержит первый четверг года
ISO_POLICY: Final[WeekPolicy] = WeekPolicy(
    first_day_of_week=Weekday.MONDAY,
    minimal_days_in_first_week=4,
    tz_name="UTC",
)

# US: воскресенье, неделя 1 содержит 1 января
US_POLICY: Final[WeekPolicy] = WeekPolicy(
    first_day_of_week=Weekday.SUNDAY,
    minimal_days_in_first_week=1,
    tz_name="UTC",
)
