"""
Domain models and value objects.

Contains the BigInteger value type and its operations.
"""

from src.core.domain.big_integer import (
    CONTRACT_SCHEMA_VERSION,
    ONE,
    ZERO,
    BigInteger,
    BigIntegerParseError,
    DivideByZeroError,
    InvalidDigitError,
    absolute,
    add,
    compare,
    divide,
    equals,
    multiply,
    negate,
    parse,
    subtract,
    to_text,
)

__all__ = [
    # Model
    "BigInteger",
    "ZERO",
    "ONE",
    "CONTRACT_SCHEMA_VERSION",
    # Exceptions
    "BigIntegerParseError",
    "InvalidDigitError",
    "DivideByZeroError",
    # Construction & text
    "parse",
    "to_text",
    # Comparison & negation
    "compare",
    "equals",
    "negate",
    "absolute",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
]
