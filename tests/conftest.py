"""Shared fixtures for bignum tests."""
from __future__ import annotations

import pytest

from bignum.biginteger import BigInteger
from bignum.contract import Bounds, build_contract
from bignum.rational import Rational

# 2**127 - 1, the largest signed 128-bit value
INT128_MAX = "170141183460469231731687303715884105727"
GOOGOL = "1" + "0" * 100


@pytest.fixture
def int128_max() -> BigInteger:
    return BigInteger(INT128_MAX)


@pytest.fixture
def googol() -> BigInteger:
    return BigInteger(GOOGOL)


@pytest.fixture
def one_third() -> Rational:
    return Rational(1) / Rational(3)


@pytest.fixture
def tiny_bounds() -> Bounds:
    """[-12, 12]: small enough for exhaustive sweeps inside the test suite."""
    return Bounds(lo=-12, hi=12)


@pytest.fixture
def tiny_contract(tiny_bounds):
    return build_contract(tiny_bounds)
