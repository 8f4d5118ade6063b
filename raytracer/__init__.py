"""
raytracer — homogeneous point/vector algebra.

Public entry points are re-exported here for convenience.
"""

from raytracer.core.domain import Tuple

__all__ = ["Tuple"]
