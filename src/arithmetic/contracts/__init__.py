"""
Contract Validation Module

Модуль для валидации JSON контрактов арифметического модуля.
"""

from .validators import (
    DIVISION_OUTCOME_SCHEMA,
    SCHEMA_DIR,
    ContractValidator,
    DivisionOutcomeValidator,
    SchemaLoader,
    validate_division_outcome,
)

__all__ = [
    # Constants
    "DIVISION_OUTCOME_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DivisionOutcomeValidator",
    # Functions
    "validate_division_outcome",
]
