"""
Arithmetic module: integer addition and zero-guarded division.

This package contains the Calculator, its error kinds, the tagged
DivisionOutcome and the JSON contract that outcomes serialize to.
"""

from src.arithmetic.domain import (
    CalculatorError,
    CalculatorErrorKind,
    DivisionByZeroError,
    DivisionFailure,
    DivisionOutcome,
    DivisionSuccess,
)
from src.arithmetic.math import Calculator

__all__ = [
    "Calculator",
    "CalculatorError",
    "CalculatorErrorKind",
    "DivisionByZeroError",
    "DivisionFailure",
    "DivisionOutcome",
    "DivisionSuccess",
]
