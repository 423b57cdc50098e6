"""
Core math modules для arithmetic

Calculator: сложение целых и деление с защитой от нулевого делителя.
"""

from src.arithmetic.math.calculator import (
    Calculator,
    CalculatorError,
    CalculatorErrorKind,
    DivisionByZeroError,
)

__all__ = [
    # Calculator — Types
    "Calculator",
    # Calculator — Exceptions
    "CalculatorError",
    "CalculatorErrorKind",
    "DivisionByZeroError",
]
