"""
Binary exponentiation kernel (exponentiation by squaring).

Computes `base ** exponent` in O(log exponent) multiplications by walking the
binary digits of the exponent. For example, 10 = 0b1010, so

    2**10 = 2**8 * 2**2

and only the squares 2, 4, 16, 256 are ever formed.

Two formulations are provided:
- `power_iterative`: least-significant bit first, folding the running square
  into an accumulator whenever the current bit is set.
- `power_recursive`: halve the exponent, square the half power, multiply by the
  base once more for odd exponents.

Both operate on the signed 64-bit domain and agree on every input: same value,
or the same `Int64OverflowError` when the true power does not fit.
"""

from __future__ import annotations

from ..bounds import checked_int64, require_int64


def _require_power_args(base: int, exponent: int) -> None:
    require_int64("base", base)
    require_int64("exponent", exponent)
    if exponent < 0:
        raise ValueError("exponent must be non-negative")


def _power_recursive(base: int, exponent: int) -> int:
    if exponent == 0:
        return 1
    half = _power_recursive(base, exponent // 2)
    square = checked_int64("power", half * half)
    if exponent % 2:
        return checked_int64("power", square * base)
    return square


def power_recursive(base: int, exponent: int) -> int:
    """
    `base ** exponent` by recursive halving of the exponent.

    Recursion depth is the bit length of `exponent` (at most 63).

    Raises:
    - TypeError if an argument is not an int,
    - ValueError if `exponent` is negative,
    - Int64OverflowError if an argument or the result does not fit in int64.
    """
    _require_power_args(base, exponent)
    return _power_recursive(base, exponent)


def power_iterative(base: int, exponent: int) -> int:
    """
    `base ** exponent` by scanning the exponent bits from least significant up.

    Same contract as `power_recursive`.
    """
    _require_power_args(base, exponent)

    result = 1
    while exponent > 0:
        if exponent & 1:
            result = checked_int64("power", result * base)
        exponent >>= 1
        # The square after the top bit is never folded in; forming it could
        # overflow even though the result fits.
        if exponent:
            base = checked_int64("power", base * base)
    return result


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation: `base ** exponent mod modulus`, in `[0, modulus)`.

    Every product is reduced before the next step, so intermediates stay below
    `modulus ** 2` and no input in the int64 domain can overflow.
    """
    _require_power_args(base, exponent)
    require_int64("modulus", modulus)
    if modulus <= 0:
        raise ValueError("modulus must be positive")

    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        if exponent:
            base = (base * base) % modulus
    return result
