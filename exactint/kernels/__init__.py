"""
Integer arithmetic kernels.

These modules are designed to be:
- deterministic (integer-only, signed 64-bit domain),
- easy to audit (one recursive and one iterative formulation side by side),
- small surface-area (pure functions, typed results),
- parity-testable: each recursive variant must agree with its iterative twin.
"""

from .binary_exponent import power_iterative, power_mod, power_recursive
from .extended_euclid import BezoutTriple, extended_gcd_iterative, extended_gcd_recursive

__all__ = [
    "power_recursive",
    "power_iterative",
    "power_mod",
    "BezoutTriple",
    "extended_gcd_recursive",
    "extended_gcd_iterative",
]
