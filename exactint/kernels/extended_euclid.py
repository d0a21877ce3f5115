"""
Extended Euclidean kernel.

Finds `gcd(a, b)` together with Bézout coefficients `x`, `y` such that

    a*x + b*y == gcd

Quotients truncate toward zero (not Python's floor `//`), so for negative
inputs the coefficients match a C-style `a / b`, `a % b` reference and the two
formulations below agree step for step.

Sign convention: the gcd is *signed*. `extended_gcd(a, 0)` returns `(a, 1, 0)`
even for negative `a`; use `BezoutTriple.normalized()` for a non-negative gcd.

The kernel never reduces modulo anything; see `exactint.modular` for inverses.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..bounds import checked_int64, require_int64


@dataclass(frozen=True)
class BezoutTriple:
    gcd: int
    x: int
    y: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.gcd, self.x, self.y)

    def satisfies(self, a: int, b: int) -> bool:
        """True iff `a*x + b*y == gcd`."""
        return a * self.x + b * self.y == self.gcd

    def normalized(self) -> BezoutTriple:
        """Same identity with a non-negative gcd (all three signs flipped if needed)."""
        if self.gcd >= 0:
            return self
        return BezoutTriple(
            gcd=checked_int64("gcd", -self.gcd),
            x=checked_int64("x", -self.x),
            y=checked_int64("y", -self.y),
        )


def _trunc_quotient(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    # INT64_MIN / -1 is the only quotient that escapes the domain.
    return checked_int64("quotient", q)


def _checked_triple(gcd: int, x: int, y: int) -> BezoutTriple:
    return BezoutTriple(
        gcd=checked_int64("gcd", gcd),
        x=checked_int64("x", x),
        y=checked_int64("y", y),
    )


def _extended_gcd_recursive(a: int, b: int) -> tuple[int, int, int]:
    if b == 0:
        return a, 1, 0
    q = _trunc_quotient(a, b)
    g, x1, y1 = _extended_gcd_recursive(b, a - q * b)
    # Inner identity: b*x1 + (a - q*b)*y1 == g; regroup around a and b.
    return g, y1, x1 - q * y1


def extended_gcd_recursive(a: int, b: int) -> BezoutTriple:
    """
    Recursive extended Euclid: solve `(b, a rem b)`, then back-substitute.

    Raises TypeError for non-int arguments and Int64OverflowError when an
    argument, a quotient or a returned coefficient does not fit in int64.
    """
    require_int64("a", a)
    require_int64("b", b)
    return _checked_triple(*_extended_gcd_recursive(a, b))


def extended_gcd_iterative(a: int, b: int) -> BezoutTriple:
    """
    Iterative extended Euclid.

    Keeps `(x0, y0)` / `(x1, y1)` alongside `(a, b)` and rotates all three
    pairs with the same quotient each step. Stack-safe; same contract as
    `extended_gcd_recursive`.
    """
    require_int64("a", a)
    require_int64("b", b)

    x0, y0, x1, y1 = 1, 0, 0, 1
    while b != 0:
        q = _trunc_quotient(a, b)
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return _checked_triple(a, x0, y0)
