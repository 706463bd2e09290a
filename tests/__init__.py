"""
Test suite for decimal-bigint

Contains:
- tests/unit/          : Unit tests for digit algorithms, the BigInteger model and contracts
"""
