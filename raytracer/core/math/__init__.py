"""
Core math modules для raytracer

Float-примитивы, на которых построена арифметика кортежей.
"""

from raytracer.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_TUPLE_COMPARE,
    # Validation
    is_valid_float,
    # Epsilon comparisons
    within_tolerance,
    # Division
    ieee_divide,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_TUPLE_COMPARE",
    # Numerical Safeguards — Validation
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "within_tolerance",
    # Numerical Safeguards — Division
    "ieee_divide",
]
