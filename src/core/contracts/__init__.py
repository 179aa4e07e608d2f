"""
Contract Validation Module

Модуль для валидации JSON контрактов weekid (записи целей, идентичности недель).
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    GoalValidator,
    WeekIdentityValidator,
    load_schema,
    read_schema,
    validate_goal,
    validate_week_identity,
)

__all__ = [
    # Schemas
    "SCHEMA_DIR",
    "load_schema",
    "read_schema",
    # Classes
    "ContractValidator",
    "WeekIdentityValidator",
    "GoalValidator",
    # Functions
    "validate_week_identity",
    "validate_goal",
]
