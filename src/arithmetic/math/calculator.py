"""
Calculator — сложение целых и деление с защитой от нуля

Модуль предоставляет две чистые операции:
- add(a, b): сумма двух целых
- divide(a, b): частное двух float, DivisionByZeroError при b == 0

И tagged-вариант деления:
- try_divide(a, b): DivisionSuccess / DivisionFailure вместо исключения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не выполняется (0.0, -0.0 и 0 → DivisionByZeroError)
2. Кроме проверки на ноль, деление следует IEEE-754 без дополнительных защит:
   NaN/Inf пропагируют, переполнение даёт inf
3. int в Python имеет произвольную точность: add не переполняется и не
   делает wrap-around, сумма всегда точная
4. Нет состояния и побочных эффектов: операции реентерабельны и
   детерминированы
"""

from src.arithmetic.domain.errors import (
    CalculatorError,
    CalculatorErrorKind,
    DivisionByZeroError,
)
from src.arithmetic.domain.outcome import (
    DivisionFailure,
    DivisionOutcome,
    DivisionSuccess,
)

__all__ = [
    "Calculator",
    "CalculatorError",
    "CalculatorErrorKind",
    "DivisionByZeroError",
]


class Calculator:
    """
    Арифметический модуль без состояния.

    Экземпляр не хранит данных: один и тот же объект можно разделять между
    потоками, или создавать новый на каждый вызов (как делают тесты).
    """

    __slots__ = ()

    def add(self, a: int, b: int) -> int:
        """
        Сумма двух целых.

        Examples:
            >>> Calculator().add(2, 3)
            5
            >>> Calculator().add(2**63 - 1, 1)
            9223372036854775808
        """
        return a + b

    def divide(self, a: float, b: float) -> float:
        """
        Частное a / b.

        Операнды — float. int допускается, но true division целых, частное
        которых не помещается в float, выбрасывает OverflowError.

        Args:
            a: Делимое
            b: Делитель

        Returns:
            a / b по правилам IEEE-754

        Raises:
            DivisionByZeroError: Если b == 0 (включая -0.0)
            OverflowError: Для int операндов, если частное вне диапазона float

        Examples:
            >>> Calculator().divide(15.0, 3.0)
            5.0
            >>> Calculator().divide(10.0, 0.0)  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            DivisionByZeroError: Division by zero: 10.0 / 0
        """
        # NaN != 0, поэтому NaN-делитель проходит и даёт NaN
        if b == 0:
            raise DivisionByZeroError(a)

        return a / b

    def try_divide(self, a: float, b: float) -> DivisionOutcome:
        """
        Деление без исключения для нулевого делителя.

        Returns:
            DivisionSuccess(value=a / b) или
            DivisionFailure(kind=DIVISION_BY_ZERO)
        """
        try:
            value = self.divide(a, b)
        except DivisionByZeroError as exc:
            return DivisionFailure(kind=exc.kind)

        return DivisionSuccess(value=value)
