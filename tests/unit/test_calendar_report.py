"""
Тесты для диагностики календарных полей (src.diagnostics)

Проверяет:
1. Календарные поля 31.07 / 01.08 / 02.08.2025
2. Расхождение стратегий смещения недели на границе года
3. Текстовый отчёт
"""

from datetime import date

import pytest

from src.core.calendar import InvalidCalendarDate, instant_from_date
from src.core.domain import ISO_POLICY, US_POLICY, Weekday
from src.diagnostics import (
    calendar_fields,
    calendar_fields_for_date,
    compare_week_offset_strategies,
    render_report,
)


class TestCalendarFields:
    """Тесты calendar_fields"""

    def test_july_31(self) -> None:
        fields = calendar_fields_for_date(2025, 7, 31, US_POLICY)
        assert fields.day == date(2025, 7, 31)
        assert fields.week_of_month == 5
        assert fields.week_of_year == 31
        assert fields.week_year == 2025
        assert fields.month == 7
        assert fields.day_of_week == Weekday.THURSDAY

    def test_august_1(self) -> None:
        fields = calendar_fields_for_date(2025, 8, 1, US_POLICY)
        assert fields.week_of_month == 1
        assert fields.week_of_year == 31
        assert fields.month == 8
        assert fields.day_of_week == Weekday.FRIDAY

    def test_august_2(self) -> None:
        fields = calendar_fields_for_date(2025, 8, 2, US_POLICY)
        assert fields.week_of_month == 1
        assert fields.day_of_week == Weekday.SATURDAY

    def test_goal_timestamp(self) -> None:
        fields = calendar_fields(1752932126000, ISO_POLICY)
        assert fields.day == date(2025, 7, 19)
        assert fields.week_of_year == 29
        assert fields.week_of_month == 3

    def test_invalid_date(self) -> None:
        with pytest.raises(InvalidCalendarDate):
            calendar_fields_for_date(2025, 7, 32, US_POLICY)


class TestWeekOffsetStrategies:
    """Сравнение naive / aligned смещений"""

    def test_strategies_agree_inside_year(self) -> None:
        """Цель 19.07.2025 (W29), сейчас 21.07.2025 (W30): обе стратегии дают -1"""
        goal = instant_from_date(2025, 7, 19, ISO_POLICY)
        now = instant_from_date(2025, 7, 21, ISO_POLICY)

        comparison = compare_week_offset_strategies(goal, now, ISO_POLICY)

        assert comparison.naive_offset == -1
        assert comparison.aligned_offset == -1
        assert comparison.strategies_agree

    def test_strategies_disagree_across_year(self, caplog: pytest.LogCaptureFixture) -> None:
        """Цель 27.12.2025 (W52), сейчас 03.01.2026 (W01 2026), US"""
        goal = instant_from_date(2025, 12, 27, US_POLICY)
        now = instant_from_date(2026, 1, 3, US_POLICY)

        with caplog.at_level("WARNING"):
            comparison = compare_week_offset_strategies(goal, now, US_POLICY)

        assert comparison.goal_week.label() == "2025-W52"
        assert comparison.current_week.label() == "2026-W01"
        assert comparison.naive_offset == 51
        assert comparison.aligned_offset == -1
        assert not comparison.strategies_agree
        assert "strategies disagree" in caplog.text


class TestRenderReport:
    """Текстовый отчёт"""

    def test_report_contains_fields(self) -> None:
        report = render_report(
            [
                calendar_fields_for_date(2025, 7, 31, US_POLICY),
                calendar_fields_for_date(2025, 8, 1, US_POLICY),
            ]
        )
        assert "=== 2025-07-31 ===" in report
        assert "Week of Month: 5" in report
        assert "=== 2025-08-01 ===" in report
        assert "Day of Week: Friday" in report
        assert "Week of Year: 31 (2025)" in report

    def test_empty_report(self) -> None:
        assert render_report([]) == ""
