"""
JSON Schema Contract Validators

Записи целей и идентичности недель проверяются формальными JSON Schema
контрактами (draft 2020-12) до построения Pydantic моделей.

Схемы (src/core/contracts/schema/):
- week_identity.json
- goal.json
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator


SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def read_schema(schema_path: Path) -> Dict[str, Any]:
    """
    Чтение и meta-валидация файла схемы.

    Raises:
        FileNotFoundError: Файл схемы отсутствует
        ValueError: Файл не является валидной JSON Schema
    """
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e
    return schema


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Схема контракта по имени ('goal', 'week_identity'); кэшируется"""
    return read_schema(SCHEMA_DIR / f"{schema_name}.json")


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор записей одного контракта"""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, record: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Запись не соответствует контракту
        """
        self.validator.validate(record)


class WeekIdentityValidator(ContractValidator):
    def __init__(self):
        super().__init__("week_identity")


class GoalValidator(ContractValidator):
    def __init__(self):
        super().__init__("goal")


_WEEK_IDENTITY_VALIDATOR = WeekIdentityValidator()
_GOAL_VALIDATOR = GoalValidator()


def validate_week_identity(record: Dict[str, Any]) -> None:
    """Проверка записи (week_number, week_year)"""
    _WEEK_IDENTITY_VALIDATOR.validate(record)


def validate_goal(record: Dict[str, Any]) -> None:
    """
    Проверка записи цели.

    Метка недели (week_of_year, week_year) допускается только парой.

    Raises:
        ValidationError: Запись не соответствует goal.json
    """
    _GOAL_VALIDATOR.validate(record)
