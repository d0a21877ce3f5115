"""Recursive vs iterative parity for both kernels.

Uses Hypothesis to fuzz the int64 domain and checks that the two formulations
agree on the value returned or on the overflow raised.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Any, Callable

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import example, given, settings

from exactint import INT64_MAX, INT64_MIN, Int64OverflowError
from exactint.kernels import (
    extended_gcd_iterative,
    extended_gcd_recursive,
    power_iterative,
    power_mod,
    power_recursive,
)

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


def _outcome(fn: Callable[..., Any], *args: int) -> tuple[str, Any]:
    try:
        return "ok", fn(*args)
    except Int64OverflowError as exc:
        return "overflow", exc.name


class TestPowerParity:
    @given(base=st.integers(min_value=-(1 << 20), max_value=1 << 20), exponent=st.integers(min_value=0, max_value=128))
    @settings(max_examples=500, deadline=None)
    def test_variants_agree_and_match_exact_power(self, base: int, exponent: int):
        rec = _outcome(power_recursive, base, exponent)
        it = _outcome(power_iterative, base, exponent)
        assert rec == it

        exact = base**exponent
        if INT64_MIN <= exact <= INT64_MAX:
            assert rec == ("ok", exact)
        else:
            assert rec == ("overflow", "power")

    @given(base=int64s, exponent=st.integers(min_value=0, max_value=INT64_MAX))
    @example(base=-2, exponent=63)
    @example(base=2, exponent=62)
    @example(base=0, exponent=INT64_MAX)
    @settings(max_examples=300, deadline=None)
    def test_variants_agree_on_the_full_domain(self, base: int, exponent: int):
        assert _outcome(power_recursive, base, exponent) == _outcome(power_iterative, base, exponent)

    @given(base=int64s, exponent=st.integers(min_value=0, max_value=INT64_MAX), modulus=st.integers(min_value=1, max_value=INT64_MAX))
    @settings(max_examples=300, deadline=None)
    def test_power_mod_matches_builtin_pow(self, base: int, exponent: int, modulus: int):
        assert power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


class TestExtendedGcdParity:
    @given(a=int64s, b=int64s)
    @example(a=0, b=0)
    @example(a=INT64_MIN, b=-1)
    @example(a=INT64_MIN, b=INT64_MAX)
    @example(a=-1, b=INT64_MIN)
    @settings(max_examples=1000, deadline=None)
    def test_variants_agree(self, a: int, b: int):
        assert _outcome(extended_gcd_recursive, a, b) == _outcome(extended_gcd_iterative, a, b)

    @given(a=int64s, b=int64s)
    @settings(max_examples=1000, deadline=None)
    def test_bezout_identity_holds(self, a: int, b: int):
        status, triple = _outcome(extended_gcd_iterative, a, b)
        if status != "ok":
            return
        assert a * triple.x + b * triple.y == triple.gcd
        assert abs(triple.gcd) == math.gcd(a, b)

    @given(a=int64s)
    def test_zero_second_argument(self, a: int):
        assert extended_gcd_recursive(a, 0).as_tuple() == (a, 1, 0)
        assert extended_gcd_iterative(a, 0).as_tuple() == (a, 1, 0)
