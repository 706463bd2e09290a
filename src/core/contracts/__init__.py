"""
Contract Validation Module

Модуль для валидации JSON контрактов формы обмена BigInteger.
"""

from .validators import (
    BigIntegerValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_integer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    # Functions
    "validate_big_integer",
]
