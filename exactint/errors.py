"""Exception types for the exactint kernels.

Argument type problems raise ``TypeError`` and precondition violations raise
``ValueError``; the classes here cover domain-bound and inversion failures.
"""

from __future__ import annotations


class Int64OverflowError(Exception):
    """Raised when an input or a result leaves the signed 64-bit domain."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} out of int64 range: {value}")


class NotInvertibleError(Exception):
    """Raised when a value has no multiplicative inverse modulo ``modulus``."""

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(f"{value} is not invertible modulo {modulus} (gcd={gcd})")
