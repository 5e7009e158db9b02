"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Поиск первого не-конечного элемента
3. Последовательное суммирование (без компенсации)
"""

import math

import pytest

from src.numseq.math.numerical_safeguards import (
    first_non_finite_index,
    is_valid_float,
    sequential_sum,
)


# =============================================================================
# ТЕСТЫ NaN/Inf ДЕТЕКЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    @pytest.mark.parametrize("value", [0.0, -0.0, 1.5, -1e308, 5e-324, 7])
    def test_finite_values(self, value) -> None:
        assert is_valid_float(value) is True

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values(self, value) -> None:
        assert is_valid_float(value) is False


class TestFirstNonFiniteIndex:
    """Тесты для first_non_finite_index"""

    def test_all_finite(self) -> None:
        assert first_non_finite_index([1.0, 2.0, 3.0]) is None

    def test_empty(self) -> None:
        assert first_non_finite_index([]) is None

    def test_returns_first_position(self) -> None:
        assert first_non_finite_index([1.0, math.inf, math.nan]) == 1
        assert first_non_finite_index([math.nan]) == 0


# =============================================================================
# ТЕСТЫ СУММИРОВАНИЯ
# =============================================================================


class TestSequentialSum:
    """Тесты для sequential_sum"""

    def test_basic(self) -> None:
        assert sequential_sum([2.0, 2.0, 2.0], 0.0) == 6.0

    def test_empty_returns_start(self) -> None:
        assert sequential_sum([], 0.0) == 0.0
        assert sequential_sum([], 0) == 0

    def test_no_compensation(self) -> None:
        """Потеря точности как у наивного накопления (1e16 + 1 == 1e16)."""
        assert sequential_sum([1e16, 1.0, -1e16], 0.0) == 0.0

    def test_ints_stay_exact(self) -> None:
        assert sequential_sum([2**60, 2**60, 1], 0) == 2**61 + 1

    def test_nan_propagates(self) -> None:
        assert math.isnan(sequential_sum([1.0, math.nan], 0.0))
