"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных кортежей.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TupleValidator,
    validate_tuple,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TupleValidator",
    # Functions
    "validate_tuple",
]
