"""Exact rational numbers over BigInteger.

A Rational is a numerator/denominator pair kept in reduced form:
the denominator is positive and gcd(|numerator|, denominator) == 1.
Zero is always stored as 0/1.  Every operator reduces its result
before returning it.
"""
from __future__ import annotations

import math
from typing import Union

from bignum.biginteger import BigInteger
from bignum.exceptions import DivisionByZeroError, MalformedInputError

# Fractional digits used by float(); the conversion is a best-effort
# narrowing, not a correctly rounded one.
FLOAT_PRECISION = 9

RationalLike = Union["Rational", BigInteger, int]


def gcd(a: BigInteger, b: BigInteger) -> BigInteger:
    """Greatest common divisor by the Euclidean algorithm (never negative)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _split_fraction(text: str) -> tuple[BigInteger, BigInteger]:
    numerator, sep, denominator = text.partition("/")
    if not sep:
        return BigInteger(numerator), BigInteger(1)
    if denominator.startswith("-"):
        raise MalformedInputError(text, "denominator must not carry a sign")
    return BigInteger(numerator), BigInteger(denominator)


class Rational:
    """Exact fraction of two BigIntegers in lowest terms."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(
        self,
        numerator: Union[Rational, BigInteger, int, str] = 0,
        denominator: Union[BigInteger, int] = 1,
    ) -> None:
        if isinstance(numerator, Rational):
            num, den = numerator._numerator, numerator._denominator
        elif isinstance(numerator, str):
            num, den = _split_fraction(numerator)
        else:
            num, den = BigInteger(numerator), BigInteger(1)

        den = den * BigInteger(denominator)
        if not den:
            raise DivisionByZeroError(numerator)
        self._numerator, self._denominator = _reduce(num, den)

    @classmethod
    def _from_reduced(cls, numerator: BigInteger, denominator: BigInteger) -> Rational:
        obj = object.__new__(cls)
        obj._numerator = numerator
        obj._denominator = denominator
        return obj

    @classmethod
    def _from_parts(cls, numerator: BigInteger, denominator: BigInteger) -> Rational:
        return cls._from_reduced(*_reduce(numerator, denominator))

    # -- inspection -----------------------------------------------------

    @property
    def numerator(self) -> BigInteger:
        return self._numerator

    @property
    def denominator(self) -> BigInteger:
        return self._denominator

    def __bool__(self) -> bool:
        return bool(self._numerator)

    # -- arithmetic -----------------------------------------------------

    def _add(self, other: Rational) -> Rational:
        return Rational._from_parts(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def _mul(self, other: Rational) -> Rational:
        return Rational._from_parts(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def _div(self, other: Rational) -> Rational:
        """Multiply by the reciprocal of ``other``."""
        if not other._numerator:                                 # RAT-DIV-ZERO
            raise DivisionByZeroError(self)
        return Rational._from_parts(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __neg__(self) -> Rational:
        return Rational._from_reduced(-self._numerator, self._denominator)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational._from_reduced(abs(self._numerator), self._denominator)

    def __add__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(other)

    def __radd__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(self)

    def __sub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(-other)

    def __rsub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(-self)

    def __mul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._mul(other)

    def __rmul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._mul(self)

    def __truediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._div(other)

    def __rtruediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._div(self)

    # -- comparison -----------------------------------------------------

    def _less(self, other: Rational) -> bool:
        # denominators are positive, so cross-multiplying keeps the order
        return (self._numerator * other._denominator
                < other._numerator * self._denominator)

    def __lt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._less(other)

    def __gt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._less(self)

    def __le__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not other._less(self)

    def __ge__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self._less(other)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # both sides are reduced, so equal values have equal parts
        return (self._numerator == other._numerator
                and self._denominator == other._denominator)

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # -- conversions ----------------------------------------------------

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational('{self}')"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def as_decimal(self, precision: int = 0) -> str:
        """Truncated (not rounded) decimal expansion with ``precision`` digits.

        The numerator is scaled by 10**precision, divided by the
        denominator, and a point is placed ``precision`` digits from the
        right.  Negative values keep their ``-`` even when every printed
        digit is zero, e.g. ``-1/1000`` at precision 2 is ``"-0.00"``.
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        scaled = str(abs(self._numerator).shift(precision) / self._denominator)
        sign = "-" if self._numerator.is_negative else ""

        if precision == 0:                                       # DEC-INTEGER
            return sign + scaled
        if len(scaled) <= precision:                             # DEC-PAD
            return f"{sign}0.{scaled.rjust(precision, '0')}"
        return f"{sign}{scaled[:-precision]}.{scaled[-precision:]}"  # DEC-SPLIT

    def __float__(self) -> float:
        """Best-effort float built digit by digit from a scaled quotient."""
        scaled = abs(self._numerator).shift(FLOAT_PRECISION) / self._denominator
        # raises OverflowError past float range, as float(int) does
        place = 10.0 ** (len(scaled) - 1 - FLOAT_PRECISION)
        value = 0.0
        for digit in reversed(scaled.digits):
            value += digit * place
            place /= 10
        if math.isinf(value):
            raise OverflowError("Rational too large to convert to float")
        return -value if self._numerator.is_negative else value


# ---------------------------------------------------------------------------
# Module helpers
# ---------------------------------------------------------------------------

def _reduce(numerator: BigInteger, denominator: BigInteger) -> tuple[BigInteger, BigInteger]:
    """Divide out the gcd and move the sign onto the numerator."""
    g = gcd(numerator, denominator)
    numerator, denominator = numerator / g, denominator / g
    if denominator.is_negative:                                  # RAT-SIGN-FLIP
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def _coerce(value: object) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, (BigInteger, int)):
        return Rational(value)
    return NotImplemented
