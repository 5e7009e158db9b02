"""
Numerical Safeguards — примитивы для числовых последовательностей

Модуль содержит общие численные операции, которые используются
последовательностями и кодировщиком JSON:
- Проверка float на конечность (NaN/Inf детекция)
- Поиск первого невалидного элемента в последовательности
- Последовательное суммирование в порядке обхода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Суммирование строго слева направо, без компенсации (Kahan/Neumaier)
2. Результат суммы воспроизводим для фиксированного порядка элементов
3. Все операции детерминированы и не модифицируют вход
"""

import math
from typing import Iterable, Optional, Sequence, TypeVar

N = TypeVar("N", int, float)


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int или float)

    Returns:
        True если значение конечное, False если NaN или Inf

    Examples:
        >>> is_valid_float(1.5)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(float('-inf'))
        False
    """
    return math.isfinite(value)


def first_non_finite_index(values: Sequence[float]) -> Optional[int]:
    """
    Индекс первого NaN/Inf элемента.

    Args:
        values: Последовательность значений

    Returns:
        Индекс первого невалидного элемента или None, если все конечные

    Examples:
        >>> first_non_finite_index([1.0, 2.0])
        >>> first_non_finite_index([1.0, float('inf'), float('nan')])
        1
    """
    for i, value in enumerate(values):
        if not is_valid_float(value):
            return i
    return None


# =============================================================================
# СУММИРОВАНИЕ
# =============================================================================


def sequential_sum(values: Iterable[N], start: N) -> N:
    """
    Сумма элементов последовательным накоплением.

    Встроенный sum() начиная с Python 3.12 использует компенсированное
    суммирование для float, поэтому результат может отличаться от
    наивного накопления. Здесь порядок и округление фиксированы:
    acc = ((start + v0) + v1) + ...

    Args:
        values: Значения в порядке обхода
        start: Нулевой элемент (0 или 0.0)

    Returns:
        Накопленная сумма

    Examples:
        >>> sequential_sum([2.0, 2.0, 2.0], 0.0)
        6.0
        >>> sequential_sum([], 0)
        0
    """
    acc = start
    for value in values:
        acc = acc + value
    return acc
