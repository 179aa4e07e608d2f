"""
WeekIdentity — Идентичность календарной недели

Пара (week_number, week_year). Вычисляется из instant и WeekPolicy,
самостоятельного жизненного цикла не имеет.

week_year может отличаться от календарного года для дней рядом с 1 января:
при ISO-политике 29.12.2025 относится к неделе 1 года 2026.
"""

from pydantic import BaseModel, Field


class WeekIdentity(BaseModel):
    """
    Номер недели и год нумерации.

    Immutable модель (frozen=True), hashable — может быть ключом dict.
    """

    week_number: int = Field(..., ge=1, le=53, description="Номер недели (1-53)")
    week_year: int = Field(..., ge=1, le=9999, description="Год нумерации недель")

    model_config = {"frozen": True}  # Immutable

    def same_week(self, other: "WeekIdentity") -> bool:
        """True если обе недели совпадают по номеру и году"""
        return self.week_number == other.week_number and self.week_year == other.week_year

    def sort_key(self) -> tuple[int, int]:
        """Хронологический ключ сортировки"""
        return (self.week_year, self.week_number)

    def label(self) -> str:
        """Метка вида '2026-W01'"""
        return f"{self.week_year:04d}-W{self.week_number:02d}"

    def __str__(self) -> str:
        return self.label()
