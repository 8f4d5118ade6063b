"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Строгое сравнение с абсолютной толерантностью
2. Деление с семантикой IEEE-754
3. Валидацию float
"""

import math

import pytest

from raytracer.core.math.numerical_safeguards import (
    EPS_TUPLE_COMPARE,
    ieee_divide,
    is_valid_float,
    within_tolerance,
)

# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestWithinTolerance:
    """Тесты для within_tolerance"""

    def test_default_eps(self) -> None:
        """Толерантность по умолчанию — 1e-5"""
        assert EPS_TUPLE_COMPARE == 1e-5

    def test_identical_values(self) -> None:
        """Одинаковые значения близки"""
        assert within_tolerance(1.0, 1.0)
        assert within_tolerance(-3.5, -3.5)
        assert within_tolerance(0.0, -0.0)

    def test_below_tolerance(self) -> None:
        """Разница меньше tol — близки"""
        assert within_tolerance(1.0, 1.0 + 1e-6)
        assert within_tolerance(0.0, 9.9e-6)
        assert within_tolerance(0.0, -9.9e-6)

    def test_boundary_is_exclusive(self) -> None:
        """Ровно tol — уже не близки"""
        assert not within_tolerance(0.0, 1e-5)
        assert not within_tolerance(0.0, -1e-5)
        assert not within_tolerance(0.0, 0.5, tol=0.5)

    def test_above_tolerance(self) -> None:
        """Разница больше tol — не близки"""
        assert not within_tolerance(1.0, 1.1)
        assert not within_tolerance(0.0, 2e-5)

    def test_custom_tolerance(self) -> None:
        """Явная толерантность"""
        assert within_tolerance(1.0, 1.05, tol=0.1)
        assert not within_tolerance(1.0, 1.2, tol=0.1)

    def test_nan_never_close(self) -> None:
        """NaN не близок ни к чему"""
        assert not within_tolerance(math.nan, 0.0)
        assert not within_tolerance(math.nan, math.nan)

    def test_infinities(self) -> None:
        """inf - inf = NaN, поэтому бесконечности не близки даже к себе"""
        assert not within_tolerance(math.inf, math.inf)
        assert not within_tolerance(math.inf, 1e308)

    def test_invalid_tol_raises(self) -> None:
        """Невалидный tol вызывает ошибку"""
        with pytest.raises(ValueError, match="tol must be positive"):
            within_tolerance(1.0, 1.0, tol=0.0)

        with pytest.raises(ValueError, match="tol must be positive"):
            within_tolerance(1.0, 1.0, tol=-1e-6)

        with pytest.raises(ValueError, match="tol must be positive"):
            within_tolerance(1.0, 1.0, tol=math.nan)


# =============================================================================
# ТЕСТЫ IEEE-754 ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_normal_division(self) -> None:
        """Обычное деление совпадает с оператором /"""
        assert ieee_divide(10.0, 2.0) == 5.0
        assert ieee_divide(-10.0, 4.0) == -2.5
        assert ieee_divide(1.0, 3.0) == pytest.approx(1.0 / 3.0)

    def test_positive_over_zero(self) -> None:
        """x > 0 / +0 → +inf"""
        assert ieee_divide(3.0, 0.0) == math.inf

    def test_negative_over_zero(self) -> None:
        """x < 0 / +0 → -inf"""
        assert ieee_divide(-3.0, 0.0) == -math.inf

    def test_signed_zero_denominator(self) -> None:
        """Знак -0.0 учитывается"""
        assert ieee_divide(3.0, -0.0) == -math.inf
        assert ieee_divide(-3.0, -0.0) == math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        """0 / 0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(-0.0, 0.0))

    def test_nan_over_zero_is_nan(self) -> None:
        """NaN / 0 → NaN"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_inf_over_zero(self) -> None:
        """inf / 0 → inf со знаком"""
        assert ieee_divide(math.inf, 0.0) == math.inf
        assert ieee_divide(math.inf, -0.0) == -math.inf

    def test_integer_zero(self) -> None:
        """Целый 0 в знаменателе"""
        assert ieee_divide(2.0, 0) == math.inf

    def test_nan_propagates(self) -> None:
        """NaN в числителе с ненулевым знаменателем"""
        assert math.isnan(ieee_divide(math.nan, 2.0))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(1.0)
        assert is_valid_float(-1e-10)
        assert is_valid_float(1e308)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(math.nan)

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)
