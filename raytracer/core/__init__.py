"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of any renderer: the homogeneous Tuple and the float helpers behind it.
"""
