"""
Modular multiplicative inverse on top of the extended Euclidean kernel.

If `gcd(a, M) == 1` then `extended_gcd(a, M)` yields `a*x + M*y == 1`, hence
`a*x == 1 (mod M)`; reducing `x` into `[0, M)` gives the inverse.
"""

from __future__ import annotations

from .bounds import require_int64
from .errors import NotInvertibleError
from .kernels.extended_euclid import extended_gcd_iterative


def _require_modulus(modulus: int) -> None:
    require_int64("modulus", modulus)
    if modulus <= 0:
        raise ValueError("modulus must be positive")


def is_invertible(a: int, modulus: int) -> bool:
    require_int64("a", a)
    _require_modulus(modulus)
    return extended_gcd_iterative(a % modulus, modulus).gcd == 1


def mod_inverse(a: int, modulus: int) -> int:
    """
    Return `y` in `[0, modulus)` with `(a * y) % modulus == 1 % modulus`.

    `a` may be negative or larger than `modulus`; it is reduced first.
    Raises NotInvertibleError when `a` and `modulus` share a factor.
    """
    require_int64("a", a)
    _require_modulus(modulus)

    residue = a % modulus
    triple = extended_gcd_iterative(residue, modulus)
    if triple.gcd != 1:
        raise NotInvertibleError(a, modulus, triple.gcd)
    return triple.x % modulus
