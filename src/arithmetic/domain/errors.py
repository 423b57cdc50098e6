"""
Calculator errors — виды ошибок и исключения арифметического модуля

Единственный вид ошибки: DIVISION_BY_ZERO (делитель точно равен нулю).

Ошибка существует в двух формах:
- CalculatorErrorKind — значение enum, используется в tagged outcome (DivisionFailure)
- DivisionByZeroError — исключение, выбрасывается Calculator.divide

Исключение наследует и ZeroDivisionError, поэтому вызывающий код может ловить
его как встроенное исключение Python.
"""

from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class CalculatorErrorKind(str, Enum):
    """Вид ошибки арифметической операции."""

    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculatorError(Exception):
    """
    Базовое исключение арифметического модуля.

    Каждый подкласс фиксирует свой kind, чтобы исключение можно было
    однозначно сопоставить с DivisionFailure и обратно.
    """

    kind: CalculatorErrorKind


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """
    Деление на ноль: делитель равен 0.0, -0.0 или 0.

    Деление не выполняется. Восстановление и повторы — ответственность
    вызывающего кода.
    """

    kind = CalculatorErrorKind.DIVISION_BY_ZERO

    def __init__(self, dividend: Optional[float] = None):
        """
        Args:
            dividend: Делимое (optional, для диагностики)
        """
        self.dividend = dividend
        if dividend is None:
            message = "Division by zero"
        else:
            message = f"Division by zero: {dividend!r} / 0"
        super().__init__(message)


_ERRORS_BY_KIND: dict[CalculatorErrorKind, type[CalculatorError]] = {
    CalculatorErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
}


def error_for_kind(kind: CalculatorErrorKind) -> CalculatorError:
    """
    Исключение, соответствующее виду ошибки.

    Args:
        kind: Вид ошибки

    Returns:
        Новый экземпляр исключения (не выброшенный)

    Raises:
        ValueError: Если kind не является допустимым CalculatorErrorKind
    """
    return _ERRORS_BY_KIND[CalculatorErrorKind(kind)]()
