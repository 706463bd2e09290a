"""
Core domain model, digit-level arithmetic, and interchange contracts.

This module contains the arbitrary-precision decimal integer and everything
it is built from; nothing here depends on the platform big-integer facility.
"""
