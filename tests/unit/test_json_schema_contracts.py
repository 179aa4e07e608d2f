"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и constraints
- Интеграция с Pydantic моделями
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    GoalValidator,
    WeekIdentityValidator,
    load_schema,
    read_schema,
    validate_goal,
    validate_week_identity,
)
from src.core.domain import ISO_POLICY, WeekIdentity
from src.goals import Goal, goal_to_record


@pytest.fixture
def valid_goal_record():
    """Валидная запись цели."""
    return {
        "id": "3f1c2a9e-0000-4000-8000-000000000001",
        "text": "Run 20 km",
        "status": "ACTIVE",
        "created_at_ms": 1752932126000,
        "position": 0,
        "week_of_year": 29,
        "week_year": 2025,
    }


class TestSchemaLoading:
    """Загрузка и meta-валидация схем."""

    @pytest.mark.parametrize("schema_name", ["goal", "week_identity"])
    def test_schemas_load(self, schema_name):
        schema = load_schema(schema_name)
        assert schema["type"] == "object"

    def test_schema_cached(self):
        assert load_schema("goal") is load_schema("goal")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("market_state")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        broken = tmp_path / "broken.json"
        broken.write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            read_schema(broken)


class TestWeekIdentityContract:
    """Контракт week_identity.json."""

    def test_valid(self):
        validate_week_identity({"week_number": 53, "week_year": 2026})

    def test_model_dump_matches_contract(self):
        identity = WeekIdentity(week_number=1, week_year=2026)
        validate_week_identity(identity.model_dump())

    @pytest.mark.parametrize(
        "data",
        [
            {"week_number": 0, "week_year": 2025},
            {"week_number": 54, "week_year": 2025},
            {"week_number": 1},
            {"week_number": "1", "week_year": 2025},
            {"week_number": 1, "week_year": 2025, "month": 1},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(ValidationError):
            validate_week_identity(data)

    def test_validator_reusable(self):
        validator = WeekIdentityValidator()
        validator.validate({"week_number": 1, "week_year": 2026})
        with pytest.raises(ValidationError):
            validator.validate({"week_number": 60, "week_year": 2026})


class TestGoalContract:
    """Контракт goal.json."""

    def test_valid(self, valid_goal_record):
        validate_goal(valid_goal_record)

    def test_goal_model_record_matches_contract(self):
        validate_goal(goal_to_record(Goal.create("Goal", 1752932126000, ISO_POLICY)))

    def test_unstamped_record_with_nulls(self, valid_goal_record):
        valid_goal_record["week_of_year"] = None
        valid_goal_record["week_year"] = None
        validate_goal(valid_goal_record)

    @pytest.mark.parametrize("field", ["id", "text", "status", "created_at_ms"])
    def test_missing_required(self, valid_goal_record, field):
        del valid_goal_record[field]
        with pytest.raises(ValidationError):
            validate_goal(valid_goal_record)

    def test_week_stamp_requires_both_fields(self, valid_goal_record):
        del valid_goal_record["week_year"]
        with pytest.raises(ValidationError):
            validate_goal(valid_goal_record)

    def test_goal_validator_rejects_unknown_status(self, valid_goal_record):
        valid_goal_record["status"] = "DONE"
        with pytest.raises(ValidationError, match="DONE"):
            GoalValidator().validate(valid_goal_record)
