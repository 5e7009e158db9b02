"""
Float64s — последовательность 64-битных чисел с плавающей точкой

Элементы валидируются как float (int приводится к float). NaN и ±Inf
допустимы как элементы; при JSON-кодировании к ним применяется
NonFinitePolicy.

Examples:
    >>> Float64s([3.0, 1.0, 2.0]).sort().reverse()
    Float64s([3.0, 2.0, 1.0])
    >>> Float64s().json_string()
    '[]'
"""

import math
from typing import Tuple

from pydantic import ConfigDict, TypeAdapter

from src.numseq.contracts import Float64sValidator
from src.numseq.sequences.base import NumericSequence


class Float64s(NumericSequence[float]):
    """Неизменяемая последовательность float."""

    __slots__ = ()

    _zero = 0.0
    _adapter = TypeAdapter(
        Tuple[float, ...],
        config=ConfigDict(strict=True, ser_json_inf_nan="null"),
    )
    _contract = Float64sValidator
    _null_item = math.nan
    _check_finite = True
