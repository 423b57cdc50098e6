"""
Domain models and value objects.

Contains the error kinds of the arithmetic module and the tagged
DivisionOutcome returned by Calculator.try_divide.
"""

from src.arithmetic.domain.errors import (
    CalculatorError,
    CalculatorErrorKind,
    DivisionByZeroError,
    error_for_kind,
)
from src.arithmetic.domain.outcome import (
    OUTCOME_SCHEMA_VERSION,
    DivisionFailure,
    DivisionOutcome,
    DivisionSuccess,
    parse_division_outcome,
)

__all__ = [
    # Errors
    "CalculatorError",
    "CalculatorErrorKind",
    "DivisionByZeroError",
    "error_for_kind",
    # Outcome
    "OUTCOME_SCHEMA_VERSION",
    "DivisionFailure",
    "DivisionOutcome",
    "DivisionSuccess",
    "parse_division_outcome",
]
