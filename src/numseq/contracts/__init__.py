"""
Contract Validation Module

Модуль для валидации JSON-представления последовательностей numseq.
"""

from .validators import (
    ContractValidator,
    Float64sValidator,
    IntsValidator,
    SchemaLoader,
    StrictIntegerValidator,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "Float64sValidator",
    "IntsValidator",
    "StrictIntegerValidator",
]
