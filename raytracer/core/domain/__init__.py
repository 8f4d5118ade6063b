"""
Domain models and value objects.

Contains the homogeneous Tuple used for points and vectors.
"""

from raytracer.core.domain.tuples import W_POINT, W_VECTOR, Tuple

__all__ = [
    # Tuple model
    "Tuple",
    # Discriminant constants
    "W_POINT",
    "W_VECTOR",
]
