"""Arbitrary-precision signed integers stored as decimal digits.

A BigInteger is a sign flag plus a magnitude held as a tuple of decimal
digits, least significant first.  Every constructor and operator hands
back a canonical value:

  - the digit tuple is never empty
  - the most significant digit is non-zero unless the value is zero
  - zero is never negative

Values are immutable.  Operators always build a fresh result, so
``x += x`` simply rebinds ``x`` to the doubled value.

Division truncates toward zero (like C, Java, Rust) and the remainder
takes the sign of the dividend.  A zero divisor raises
``DivisionByZeroError`` for ``/``, ``%`` and ``divmod``.

Decision branches are annotated with their branch ids (see
``contract.build_contract``) so white-box tests can trace coverage.
"""
from __future__ import annotations

import re
from typing import Sequence, Union

from bignum.exceptions import DivisionByZeroError, MalformedInputError

DECIMAL_PATTERN = re.compile(r"-?[0-9]+")
FORMAT_SPEC_PATTERN = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?(?P<sign>[-+ ])?(?P<zero>0)?"
    r"(?P<width>[0-9]+)?(?P<grouping>[,_])?(?P<type>[ds])?",
    re.DOTALL,
)

IntegerLike = Union["BigInteger", int]


# ---------------------------------------------------------------------------
# Magnitude helpers: digit sequences, least significant digit first
# ---------------------------------------------------------------------------

def _trim(digits: list[int]) -> list[int]:
    """Drop most significant zero digits, keeping at least one digit."""
    while len(digits) > 1 and digits[-1] == 0:              # CANON-TRIM
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def _compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """Return -1, 0 or 1 as |left| is below, equal to or above |right|."""
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    for i in range(len(left) - 1, -1, -1):
        if left[i] != right[i]:
            return -1 if left[i] < right[i] else 1
    return 0


def _add_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Digit-wise addition with carry propagation."""
    out: list[int] = []
    carry = 0
    for i in range(max(len(left), len(right))):
        total = carry
        if i < len(left):
            total += left[i]
        if i < len(right):
            total += right[i]
        if total > 9:
            out.append(total - 10)
            carry = 1
        else:
            out.append(total)
            carry = 0
    if carry:
        out.append(carry)
    return out


def _subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """Digit-wise subtraction with borrow.  Requires |larger| >= |smaller|."""
    out: list[int] = []
    borrow = 0
    for i, digit in enumerate(larger):
        value = digit - borrow
        if i < len(smaller):
            value -= smaller[i]
        if value < 0:
            value += 10
            borrow = 1
        else:
            borrow = 0
        out.append(value)
    return _trim(out)


def _shift_magnitude(digits: Sequence[int], places: int) -> list[int]:
    """Multiply by 10**places by prepending least significant zero digits."""
    if len(digits) == 1 and digits[0] == 0:
        return [0]
    return [0] * places + list(digits)


def _multiply_row(digits: Sequence[int], factor: int) -> list[int]:
    """One partial product: a magnitude times a single digit."""
    row: list[int] = []
    carry = 0
    for digit in digits:
        value = digit * factor + carry
        carry = value // 10
        row.append(value % 10)
    if carry:
        row.append(carry)
    return row


def _multiply_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Schoolbook multiplication.

    Walks ``right`` from its most significant digit.  At each step the
    running product is shifted one place (times ten) and the partial row
    ``left * digit`` is added in.
    """
    product = [0]
    for i in range(len(right) - 1, -1, -1):
        product = _shift_magnitude(product, 1)
        product = _add_magnitudes(product, _multiply_row(left, right[i]))
    return _trim(product)


def _long_divide(dividend: Sequence[int], divisor: Sequence[int]) -> list[int]:
    """Quotient magnitude of dividend / divisor by long division.

    The dividend is scanned from its most significant digit.  The running
    remainder is multiplied by ten and the next digit added; the divisor
    is then subtracted until the remainder drops below it, and the number
    of subtractions is the next quotient digit.
    """
    quotient: list[int] = []
    remainder = [0]
    for i in range(len(dividend) - 1, -1, -1):
        remainder = _trim([dividend[i]] + remainder)
        count = 0
        while _compare_magnitudes(remainder, divisor) >= 0:
            remainder = _subtract_magnitudes(remainder, divisor)
            count += 1
        quotient.append(count)
    quotient.reverse()
    return _trim(quotient)


def _digits_from_int(value: int) -> tuple[bool, list[int]]:
    negative = value < 0
    value = -value if negative else value
    if value == 0:
        return False, [0]
    digits: list[int] = []
    while value > 0:
        digits.append(value % 10)
        value //= 10
    return negative, digits


def _digits_from_str(text: str) -> tuple[bool, list[int]]:
    if DECIMAL_PATTERN.fullmatch(text) is None:
        raise MalformedInputError(text, "expected an optional '-' followed by digits")
    negative = text.startswith("-")
    body = text[1:] if negative else text
    return negative, [ord(ch) - 48 for ch in reversed(body)]


# ---------------------------------------------------------------------------
# BigInteger
# ---------------------------------------------------------------------------

class BigInteger:
    """Signed integer of unbounded size with decimal digit storage."""

    __slots__ = ("_negative", "_digits")

    def __init__(self, value: Union[int, str, BigInteger] = 0) -> None:
        if isinstance(value, BigInteger):
            negative, digits = value._negative, list(value._digits)
        elif isinstance(value, int):
            negative, digits = _digits_from_int(value)
        elif isinstance(value, str):
            negative, digits = _digits_from_str(value)
        else:
            raise TypeError(
                f"Cannot build a BigInteger from {type(value).__name__}"
            )
        self._negative, self._digits = _canonify(negative, digits)

    @classmethod
    def _from_parts(cls, negative: bool, digits: list[int]) -> BigInteger:
        """Build a canonical value straight from a sign and a magnitude."""
        obj = object.__new__(cls)
        obj._negative, obj._digits = _canonify(negative, digits)
        return obj

    # -- inspection -----------------------------------------------------

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def is_positive(self) -> bool:
        """True for every value that is not negative, zero included."""
        return not self._negative

    @property
    def digits(self) -> tuple[int, ...]:
        """Magnitude digits, least significant first."""
        return self._digits

    def __len__(self) -> int:
        return len(self._digits)

    def __bool__(self) -> bool:
        return not (len(self._digits) == 1 and self._digits[0] == 0)

    def abs(self) -> BigInteger:
        return BigInteger._from_parts(False, list(self._digits))

    def shift(self, places: int) -> BigInteger:
        """Return ``self * 10**places`` by appending zero digits."""
        if places < 0:
            raise ValueError(f"places must be non-negative, got {places}")
        return BigInteger._from_parts(
            self._negative, _shift_magnitude(self._digits, places)
        )

    # -- unary ----------------------------------------------------------

    def __neg__(self) -> BigInteger:
        return BigInteger._from_parts(not self._negative, list(self._digits))

    def __pos__(self) -> BigInteger:
        return self

    def __abs__(self) -> BigInteger:
        return self.abs()

    # -- addition / subtraction -----------------------------------------

    def _add(self, other: BigInteger) -> BigInteger:
        if self._negative == other._negative:                    # ADD-SAME-SIGN
            return BigInteger._from_parts(
                self._negative, _add_magnitudes(self._digits, other._digits)
            )

        order = _compare_magnitudes(self._digits, other._digits)
        if order == 0:                                           # ADD-CANCEL
            return BigInteger()
        if order > 0:                                            # ADD-LEFT-LARGER
            return BigInteger._from_parts(
                self._negative, _subtract_magnitudes(self._digits, other._digits)
            )
        return BigInteger._from_parts(                           # ADD-RIGHT-LARGER
            other._negative, _subtract_magnitudes(other._digits, self._digits)
        )

    def __add__(self, other: IntegerLike) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(other)

    def __radd__(self, other: int) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(self)

    def __sub__(self, other: IntegerLike) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(-other)

    def __rsub__(self, other: int) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(-self)

    # -- multiplication -------------------------------------------------

    def _mul(self, other: BigInteger) -> BigInteger:
        negative = self._negative != other._negative
        if other._digits == (0, 1):                              # MUL-TEN-SHIFT
            digits = _shift_magnitude(self._digits, 1)
        else:                                                    # MUL-SCHOOLBOOK
            digits = _multiply_magnitudes(self._digits, other._digits)
        # _canonify clears the sign of a zero product
        return BigInteger._from_parts(negative, digits)

    def __mul__(self, other: IntegerLike) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._mul(other)

    def __rmul__(self, other: int) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._mul(self)

    # -- division / modulo ----------------------------------------------

    def _div(self, other: BigInteger) -> BigInteger:
        if not other:                                            # DIV-ZERO-ERROR
            raise DivisionByZeroError(self)
        if not self:                                             # DIV-ZERO-DIVIDEND
            return BigInteger()
        if _compare_magnitudes(self._digits, other._digits) < 0:  # DIV-SMALL-DIVIDEND
            return BigInteger()
        return BigInteger._from_parts(                           # DIV-LONG
            self._negative != other._negative,
            _long_divide(self._digits, other._digits),
        )

    def _mod(self, other: BigInteger) -> BigInteger:
        if not other:                                            # MOD-ZERO-ERROR
            raise DivisionByZeroError(self)
        if not self:                                             # MOD-ZERO-DIVIDEND
            return BigInteger()
        # a % b = a - (a / b) * b; truncation leaves the dividend's sign
        return self._add(-(self._div(other)._mul(other)))        # MOD-REMAINDER

    def __truediv__(self, other: IntegerLike) -> BigInteger:
        """Truncating integer quotient."""
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._div(other)

    def __rtruediv__(self, other: int) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._div(self)

    def __mod__(self, other: IntegerLike) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._mod(other)

    def __rmod__(self, other: int) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._mod(self)

    def __divmod__(self, other: IntegerLike) -> tuple[BigInteger, BigInteger]:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._div(other), self._mod(other)

    def __rdivmod__(self, other: int) -> tuple[BigInteger, BigInteger]:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._div(self), other._mod(self)

    # -- comparison -----------------------------------------------------

    def _less(self, other: BigInteger) -> bool:
        if self._negative != other._negative:                    # CMP-SIGN
            return self._negative
        if len(self._digits) != len(other._digits):              # CMP-LENGTH
            longer = len(self._digits) > len(other._digits)
            return longer if self._negative else not longer
        order = _compare_magnitudes(self._digits, other._digits)  # CMP-DIGITS
        return order > 0 if self._negative else order < 0

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._negative == other._negative and self._digits == other._digits

    def __lt__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._less(other)

    def __gt__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._less(self)

    def __le__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not other._less(self)

    def __ge__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self._less(other)

    def __hash__(self) -> int:
        # equal to hash(int) so BigInteger(5) and 5 share dict slots
        return hash(int(self))

    # -- conversions ----------------------------------------------------

    def __int__(self) -> int:
        value = 0
        for i in range(len(self._digits) - 1, -1, -1):
            value = value * 10 + self._digits[i]
        return -value if self._negative else value

    def __str__(self) -> str:
        body = "".join(chr(48 + d) for d in reversed(self._digits))
        return "-" + body if self._negative else body

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __format__(self, format_spec: str) -> str:
        """Integer-style formatting built on the decimal text.

        Supports ``[[fill]align][sign][0][width][,|_][d|s]``.  Digit
        grouping and sign options work at any size since ``int`` is never
        involved; ``s`` formats the plain string form.
        """
        match = FORMAT_SPEC_PATTERN.fullmatch(format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {format_spec!r} for BigInteger")
        if match["type"] == "s":
            return format(str(self), format_spec)

        body = "".join(chr(48 + d) for d in reversed(self._digits))
        if match["grouping"]:
            head = len(body) % 3 or 3
            groups = [body[:head]] + [body[i:i + 3] for i in range(head, len(body), 3)]
            body = match["grouping"].join(groups)
        if self._negative:
            sign = "-"
        elif match["sign"] in ("+", " "):
            sign = match["sign"]
        else:
            sign = ""

        fill, align = match["fill"] or " ", match["align"]
        if align is None and match["zero"]:
            fill, align = "0", "="
        width = int(match["width"] or 0)
        if align == "=":
            return sign + fill * (width - len(sign) - len(body)) + body
        return format(sign + body, f"{fill}{align or '>'}{width or ''}")


# ---------------------------------------------------------------------------
# Module helpers
# ---------------------------------------------------------------------------

def _canonify(negative: bool, digits: list[int]) -> tuple[bool, tuple[int, ...]]:
    """Trim the magnitude and force zero to be non-negative."""
    digits = _trim(digits)
    if len(digits) == 1 and digits[0] == 0:                      # CANON-ZERO-SIGN
        negative = False
    return negative, tuple(digits)


def _coerce(value: object) -> BigInteger:
    """Promote native integers; anything else is NotImplemented."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return NotImplemented
