"""
Numerical Safeguards — Float Primitives for Tuple Algebra

Модуль содержит float-примитивы, на которых построена арифметика Tuple:
- Epsilon-параметр для покомпонентного сравнения
- Строгое сравнение с абсолютной толерантностью
- Деление с семантикой IEEE-754 (без ZeroDivisionError)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение строгое: abs(a - b) < tol (ровно tol — уже не равно)
2. NaN никогда не считается близким ни к чему, включая NaN
3. Деление на ноль возвращает ±inf/NaN, а не исключение
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для покомпонентного сравнения Tuple
EPS_TUPLE_COMPARE: Final[float] = 1e-5


# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def within_tolerance(a: float, b: float, tol: float = EPS_TUPLE_COMPARE) -> bool:
    """
    Строгое сравнение двух float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < tol

    В отличие от math.isclose граница не включается: значения,
    отличающиеся ровно на tol, считаются различными.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_TUPLE_COMPARE)

    Returns:
        True если разница строго меньше tol

    Raises:
        ValueError: Если tol <= 0

    Examples:
        >>> within_tolerance(1.0, 1.0 + 1e-6)
        True
        >>> within_tolerance(0.0, 1e-5)
        False
        >>> within_tolerance(float('nan'), float('nan'))
        False
    """
    if not tol > 0:
        raise ValueError(f"tol must be positive, got {tol}")

    # NaN: abs(nan) < tol всегда False
    return abs(a - b) < tol


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float с семантикой IEEE-754.

    Python бросает ZeroDivisionError при делении на 0.0; здесь вместо
    этого возвращается то, что вернуло бы железо:
    - x / ±0 (x != 0) → ±inf, знак = sign(x) * sign(denominator)
    - 0 / ±0 → NaN
    - NaN / ±0 → NaN

    Для ненулевого знаменателя результат совпадает с numerator / denominator.

    Args:
        numerator: Числитель
        denominator: Знаменатель (включая ±0.0)

    Returns:
        Результат деления

    Examples:
        >>> ieee_divide(1.0, 2.0)
        0.5
        >>> ieee_divide(-3.0, 0.0)
        -inf
        >>> ieee_divide(3.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
