"""Exact arbitrary-precision integers and rationals with decimal digit storage."""

from bignum.biginteger import BigInteger
from bignum.exceptions import DivisionByZeroError, MalformedInputError
from bignum.rational import Rational, gcd

__all__ = [
    "BigInteger",
    "Rational",
    "gcd",
    "DivisionByZeroError",
    "MalformedInputError",
]

__version__ = "0.1.0"
