"""
Exact integer arithmetic: binary exponentiation and extended Euclid.
"""

from .bounds import INT64_MAX, INT64_MIN
from .errors import Int64OverflowError, NotInvertibleError
from .kernels import (
    BezoutTriple,
    extended_gcd_iterative,
    extended_gcd_recursive,
    power_iterative,
    power_mod,
    power_recursive,
)
from .modular import is_invertible, mod_inverse

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "Int64OverflowError",
    "NotInvertibleError",
    "power_recursive",
    "power_iterative",
    "power_mod",
    "BezoutTriple",
    "extended_gcd_recursive",
    "extended_gcd_iterative",
    "mod_inverse",
    "is_invertible",
]
