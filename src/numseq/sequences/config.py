"""
Encoding Config — политика JSON-кодирования последовательностей

Стандартный JSON не имеет представления для NaN и ±Infinity.
Политика задаётся явно и передаётся в json_string() на каждый вызов:
- RAISE: кодирование отклоняется с SequenceEncodingError
- NULL: каждое не-конечное значение кодируется как null
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class NonFinitePolicy(str, Enum):
    """Обработка NaN/Inf при кодировании в JSON"""

    RAISE = "raise"
    NULL = "null"


# =============================================================================
# ERRORS
# =============================================================================


class SequenceEncodingError(ValueError):
    """
    Последовательность не может быть закодирована в валидный JSON.

    Возникает при политике RAISE, если в последовательности есть NaN или Inf.
    """

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(
            f"Cannot encode non-finite value {value!r} at index {index} as JSON"
        )


# =============================================================================
# CONFIG MODEL
# =============================================================================


class EncodingConfig(BaseModel):
    """
    Конфигурация JSON-кодирования.

    Immutable модель (frozen=True): одна конфигурация может безопасно
    использоваться из любого количества потоков.
    """

    non_finite: NonFinitePolicy = Field(
        default=NonFinitePolicy.RAISE,
        description="Обработка NaN/Inf (raise/null)",
    )

    model_config = {"frozen": True}


DEFAULT_ENCODING_CONFIG = EncodingConfig()
