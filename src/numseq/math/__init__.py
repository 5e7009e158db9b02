"""
Core math modules для numseq

Численные примитивы, общие для всех типов последовательностей.
"""

from src.numseq.math.numerical_safeguards import (
    first_non_finite_index,
    is_valid_float,
    sequential_sum,
)

__all__ = [
    # NaN/Inf детекция
    "first_non_finite_index",
    "is_valid_float",
    # Суммирование
    "sequential_sum",
]
