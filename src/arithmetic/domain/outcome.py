"""
DivisionOutcome — Tagged результат деления

Immutable Pydantic модели, представляющие исход Calculator.try_divide:
- DivisionSuccess(value) — деление выполнено, value = a / b (IEEE-754)
- DivisionFailure(kind) — деление не выполнено (делитель равен нулю)

DivisionOutcome — discriminated union по полю status.
Полная совместимость с JSON Schema (src/arithmetic/contracts/schema/division_outcome.json).
"""

from typing import Annotated, Any, Final, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from src.arithmetic.domain.errors import CalculatorErrorKind, error_for_kind

# Версия схемы division_outcome (pattern в JSON Schema: ^1$)
OUTCOME_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# OUTCOME MODELS
# =============================================================================


class DivisionSuccess(BaseModel):
    """
    Успешное деление.

    NaN/Inf в value допустимы: они получаются из IEEE-754 деления
    (например, inf / 2.0) и не считаются ошибкой.
    """

    schema_version: str = Field(
        OUTCOME_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    status: Literal["success"] = "success"
    value: float = Field(..., description="Частное a / b")

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> float:
        """Частное."""
        return self.value


class DivisionFailure(BaseModel):
    """Неуспешное деление: вид ошибки без частного."""

    schema_version: str = Field(
        OUTCOME_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    status: Literal["failure"] = "failure"
    kind: CalculatorErrorKind = Field(
        CalculatorErrorKind.DIVISION_BY_ZERO, description="Вид ошибки"
    )

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> float:
        """
        Raises:
            CalculatorError: Исключение, соответствующее kind
                (для DIVISION_BY_ZERO — DivisionByZeroError)
        """
        raise error_for_kind(self.kind)


DivisionOutcome = Annotated[
    Union[DivisionSuccess, DivisionFailure],
    Field(discriminator="status"),
]

_OUTCOME_ADAPTER: TypeAdapter[Any] = TypeAdapter(DivisionOutcome)


def parse_division_outcome(data: dict[str, Any]) -> Union[DivisionSuccess, DivisionFailure]:
    """
    Восстановление outcome из dict (например, после json.loads).

    Args:
        data: Сериализованный outcome

    Returns:
        DivisionSuccess или DivisionFailure в зависимости от status

    Raises:
        pydantic.ValidationError: Если data не соответствует ни одному варианту
    """
    return _OUTCOME_ADAPTER.validate_python(data)
