"""Executable contract for BigInteger and Rational.

Each operation is described as a collection of:
- postconditions: what the result must satisfy for given inputs
- error conditions: what inputs must cause specific exceptions
- algebraic properties: relationships that must always hold

Inputs are native ints drawn from a small ``Bounds`` domain.  Python's
own ``int`` and ``fractions.Fraction`` act as the oracle: a result is
correct when its string form matches the native result's.

The contract is machine-readable.  Validation tools iterate over it to
drive conformance tests and search for counterexamples.

Layers
------
Bounds               inclusive domain of native test inputs
OperationContract    per-operation contract (post/error/properties)
BranchPoint          every decision point white-box tests must cover
ArithmeticContract   the full contract for one input domain
build_contract()     constructs an ArithmeticContract for a Bounds
"""
from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable

from bignum.biginteger import BigInteger
from bignum.exceptions import DivisionByZeroError
from bignum.rational import Rational

# Rational add/sub/mul operands are v/RATIONAL_SCALE so results need reducing
RATIONAL_SCALE = 6
DECIMAL_PRECISION = 3


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Bounds:
    """Inclusive integer interval [lo, hi] of native test inputs."""

    lo: int
    hi: int

    def __post_init__(self) -> None:
        if self.lo > self.hi:
            raise ValueError(f"lo ({self.lo}) must be <= hi ({self.hi})")

    def contains(self, v: int) -> bool:
        return self.lo <= v <= self.hi

    @property
    def width(self) -> int:
        return self.hi - self.lo + 1

    def all_values(self) -> range:
        return range(self.lo, self.hi + 1)

    def edge_values(self) -> list[int]:
        """Boundary and sign-change values, used where a full sweep is too big."""
        candidates = [self.lo, self.lo + 1, -10, -1, 0, 1, 10, self.hi - 1, self.hi]
        out: list[int] = []
        for v in candidates:
            if self.contains(v) and v not in out:
                out.append(v)
        return out


DEFAULT_BOUNDS = Bounds(lo=-50, hi=50)


# ---------------------------------------------------------------------------
# Contract building blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Postcondition:
    name: str
    description: str
    check: Callable[..., bool]


@dataclass(frozen=True)
class ErrorCondition:
    name: str
    description: str
    trigger: Callable[..., bool]
    exception: type


@dataclass(frozen=True)
class AlgebraicProperty:
    name: str
    description: str
    arity: int          # how many free input values the check needs
    check: Callable[..., bool]


@dataclass(frozen=True)
class OperationContract:
    name: str
    operand: Callable[[int], Any]       # native int -> BigInteger / Rational
    apply: Callable[[Any, Any], Any]
    postconditions: list[Postcondition]
    error_conditions: list[ErrorCondition]
    properties: list[AlgebraicProperty]

    def run(self, a: int, b: int) -> Any:
        """Apply the operation to the values built from ``a`` and ``b``."""
        return self.apply(self.operand(a), self.operand(b))

    def should_raise(self, a: int, b: int) -> bool:
        return any(ec.trigger(a, b) for ec in self.error_conditions)


@dataclass(frozen=True)
class BranchPoint:
    """A decision point in the implementation that must be exercised."""

    id: str
    description: str
    condition: str      # human-readable boolean expression
    operation: str      # which operation / helper this belongs to


@dataclass(frozen=True)
class ArithmeticContract:
    """Complete contract for one input domain."""

    bounds: Bounds
    operations: dict[str, OperationContract]
    branches: list[BranchPoint]

    @property
    def all_properties(self) -> list[tuple[str, AlgebraicProperty]]:
        out: list[tuple[str, AlgebraicProperty]] = []
        for name, op in self.operations.items():
            for prop in op.properties:
                out.append((name, prop))
        return out

    @property
    def all_postconditions(self) -> list[tuple[str, Postcondition]]:
        out: list[tuple[str, Postcondition]] = []
        for name, op in self.operations.items():
            for post in op.postconditions:
                out.append((name, post))
        return out

    @property
    def branch_ids(self) -> list[str]:
        return [b.id for b in self.branches]


# ---------------------------------------------------------------------------
# Oracle helpers used inside the contract predicates
# ---------------------------------------------------------------------------

def truncdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor division).

    Python's ``//`` rounds toward negative infinity; BigInteger follows
    C, Java and Rust and truncates toward zero instead.
    """
    q, r = divmod(a, b)
    if r != 0 and (a < 0) != (b < 0):
        q += 1
    return q


def truncmod(a: int, b: int) -> int:
    """Remainder matching ``truncdiv``: carries the sign of ``a``."""
    return a - truncdiv(a, b) * b


def decimal_oracle(a: int, b: int, precision: int) -> str:
    """Truncated decimal expansion of a/b computed with native ints."""
    digits = str(abs(a) * 10 ** precision // abs(b))
    sign = "-" if a != 0 and (a < 0) != (b < 0) else ""
    if precision == 0:
        return sign + digits
    digits = digits.rjust(precision + 1, "0")
    return f"{sign}{digits[:-precision]}.{digits[-precision:]}"


def is_canonical(value: BigInteger) -> bool:
    """No leading zero digits, digits in 0-9, and zero is non-negative."""
    digits = value.digits
    if not digits or any(d < 0 or d > 9 for d in digits):
        return False
    if len(digits) > 1 and digits[-1] == 0:
        return False
    if digits == (0,) and value.is_negative:
        return False
    return True


def is_reduced(value: Rational) -> bool:
    """Positive denominator and gcd(|numerator|, denominator) == 1."""
    num, den = int(value.numerator), int(value.denominator)
    return den > 0 and math.gcd(num, den) == 1


def _big(v: int) -> BigInteger:
    return BigInteger(v)


def _scaled(v: int) -> Rational:
    return Rational(v, RATIONAL_SCALE)


# ---------------------------------------------------------------------------
# Contract builder
# ---------------------------------------------------------------------------

def build_contract(bounds: Bounds = DEFAULT_BOUNDS) -> ArithmeticContract:
    """Construct the full arithmetic contract for a domain of native inputs."""

    canonical = Postcondition(
        "result_canonical",
        "Result has no leading zeros and zero is non-negative",
        lambda a, b, result: is_canonical(result),
    )
    reduced = Postcondition(
        "result_reduced",
        "Result is in lowest terms with a positive denominator",
        lambda a, b, result: is_reduced(result),
    )

    # ------------------------------------------------------------------ add
    add_contract = OperationContract(
        name="add",
        operand=_big,
        apply=operator.add,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the native sum",
                lambda a, b, result: str(result) == str(a + b),
            ),
            canonical,
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "commutativity", "x + y == y + x", 2,
                lambda a, b: _big(a) + _big(b) == _big(b) + _big(a),
            ),
            AlgebraicProperty(
                "associativity", "(x + y) + z == x + (y + z)", 3,
                lambda a, b, c: (_big(a) + _big(b)) + _big(c) == _big(a) + (_big(b) + _big(c)),
            ),
            AlgebraicProperty(
                "identity", "x + 0 == x", 1,
                lambda a: _big(a) + 0 == _big(a),
            ),
            AlgebraicProperty(
                "additive_inverse", "x + (-x) == 0 and the zero is non-negative", 1,
                lambda a: (
                    _big(a) + (-_big(a)) == 0
                    and not (_big(a) + (-_big(a))).is_negative
                ),
            ),
            AlgebraicProperty(
                "self_addition", "x += x doubles x", 1,
                lambda a: _self_add(a) == _big(2 * a),
            ),
        ],
    )

    # ------------------------------------------------------------------ sub
    sub_contract = OperationContract(
        name="sub",
        operand=_big,
        apply=operator.sub,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the native difference",
                lambda a, b, result: str(result) == str(a - b),
            ),
            canonical,
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "self_inverse", "x - x == 0", 1,
                lambda a: _big(a) - _big(a) == 0,
            ),
            AlgebraicProperty(
                "anti_commutativity", "x - y == -(y - x)", 2,
                lambda a, b: _big(a) - _big(b) == -(_big(b) - _big(a)),
            ),
        ],
    )

    # ------------------------------------------------------------------ mul
    mul_contract = OperationContract(
        name="mul",
        operand=_big,
        apply=operator.mul,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the native product",
                lambda a, b, result: str(result) == str(a * b),
            ),
            canonical,
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "commutativity", "x * y == y * x", 2,
                lambda a, b: _big(a) * _big(b) == _big(b) * _big(a),
            ),
            AlgebraicProperty(
                "associativity", "(x * y) * z == x * (y * z)", 3,
                lambda a, b, c: (_big(a) * _big(b)) * _big(c) == _big(a) * (_big(b) * _big(c)),
            ),
            AlgebraicProperty(
                "zero", "x * 0 == 0", 1,
                lambda a: _big(a) * 0 == 0 and not (_big(a) * 0).is_negative,
            ),
            AlgebraicProperty(
                "ten_shift", "x * 10 (digit shift) == 10 * x (schoolbook)", 1,
                lambda a: _big(a) * _big(10) == _big(10) * _big(a) == _big(a * 10),
            ),
            AlgebraicProperty(
                "sign_xor", "sign of x * y is the xor of the operand signs", 2,
                lambda a, b: (
                    a == 0 or b == 0
                    or (_big(a) * _big(b)).is_negative == ((a < 0) != (b < 0))
                ),
            ),
        ],
    )

    # ------------------------------------------------------------------ div
    div_contract = OperationContract(
        name="div",
        operand=_big,
        apply=operator.truediv,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the truncating native quotient",
                lambda a, b, result: str(result) == str(truncdiv(a, b)),
            ),
            canonical,
        ],
        error_conditions=[
            ErrorCondition(
                "div_by_zero_error",
                "DivisionByZeroError whenever the divisor is zero",
                lambda a, b: b == 0,
                DivisionByZeroError,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "division_identity", "(x / y) * y + (x % y) == x for y != 0", 2,
                lambda a, b: (
                    b == 0
                    or (_big(a) / _big(b)) * _big(b) + _big(a) % _big(b) == _big(a)
                ),
            ),
            AlgebraicProperty(
                "identity", "x / 1 == x", 1,
                lambda a: _big(a) / 1 == _big(a),
            ),
            AlgebraicProperty(
                "self", "x / x == 1 for x != 0", 1,
                lambda a: a == 0 or _big(a) / _big(a) == 1,
            ),
            AlgebraicProperty(
                "zero_numerator", "0 / y == 0 for y != 0", 1,
                lambda b: b == 0 or _big(0) / _big(b) == 0,
            ),
        ],
    )

    # ------------------------------------------------------------------ mod
    mod_contract = OperationContract(
        name="mod",
        operand=_big,
        apply=operator.mod,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the truncating native remainder",
                lambda a, b, result: str(result) == str(truncmod(a, b)),
            ),
            canonical,
        ],
        error_conditions=[
            ErrorCondition(
                "mod_by_zero_error",
                "DivisionByZeroError whenever the divisor is zero, even for 0 % 0",
                lambda a, b: b == 0,
                DivisionByZeroError,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "remainder_sign", "a non-zero x % y has the sign of x", 2,
                lambda a, b: (
                    b == 0
                    or not (_big(a) % _big(b))
                    or (_big(a) % _big(b)).is_negative == (a < 0)
                ),
            ),
            AlgebraicProperty(
                "remainder_bound", "|x % y| < |y|", 2,
                lambda a, b: b == 0 or abs(_big(a) % _big(b)) < abs(_big(b)),
            ),
            AlgebraicProperty(
                "zero_dividend", "0 % y == 0 for y != 0", 1,
                lambda b: b == 0 or _big(0) % _big(b) == 0,
            ),
        ],
    )

    # -------------------------------------------------------------- compare
    compare_contract = OperationContract(
        name="compare",
        operand=_big,
        apply=operator.lt,
        postconditions=[
            Postcondition(
                "result_correct",
                "x < y agrees with the native order",
                lambda a, b, result: result == (a < b),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "trichotomy", "exactly one of x < y, x == y, x > y", 2,
                lambda a, b: [
                    _big(a) < _big(b), _big(a) == _big(b), _big(a) > _big(b)
                ].count(True) == 1,
            ),
            AlgebraicProperty(
                "equality_matches", "x == y exactly when the natives are equal", 2,
                lambda a, b: (_big(a) == _big(b)) == (a == b),
            ),
            AlgebraicProperty(
                "string_round_trip", "BigInteger(str(x)) == x", 1,
                lambda a: BigInteger(str(_big(a))) == _big(a) and str(_big(a)) == str(a),
            ),
            AlgebraicProperty(
                "hash_matches_int", "hash(x) == hash(native x)", 1,
                lambda a: hash(_big(a)) == hash(a),
            ),
        ],
    )

    # --------------------------------------------------------- rational add
    rational_add_contract = OperationContract(
        name="rational_add",
        operand=_scaled,
        apply=operator.add,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the Fraction sum of the sixths",
                lambda a, b, result: str(result) == str(
                    Fraction(a, RATIONAL_SCALE) + Fraction(b, RATIONAL_SCALE)
                ),
            ),
            reduced,
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "commutativity", "p + q == q + p", 2,
                lambda a, b: _scaled(a) + _scaled(b) == _scaled(b) + _scaled(a),
            ),
            AlgebraicProperty(
                "additive_inverse", "p - p == 0 stored as 0/1", 1,
                lambda a: str(_scaled(a) - _scaled(a)) == "0",
            ),
        ],
    )

    # --------------------------------------------------------- rational mul
    rational_mul_contract = OperationContract(
        name="rational_mul",
        operand=_scaled,
        apply=operator.mul,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the Fraction product of the sixths",
                lambda a, b, result: str(result) == str(
                    Fraction(a, RATIONAL_SCALE) * Fraction(b, RATIONAL_SCALE)
                ),
            ),
            reduced,
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "commutativity", "p * q == q * p", 2,
                lambda a, b: _scaled(a) * _scaled(b) == _scaled(b) * _scaled(a),
            ),
            AlgebraicProperty(
                "order_matches", "p < q agrees with Fraction order", 2,
                lambda a, b: (Rational(a, 6) < Rational(b, 7)) == (Fraction(a, 6) < Fraction(b, 7)),
            ),
        ],
    )

    # --------------------------------------------------------- rational div
    rational_div_contract = OperationContract(
        name="rational_div",
        operand=Rational,
        apply=operator.truediv,
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals Fraction(a, b)",
                lambda a, b, result: str(result) == str(Fraction(a, b)),
            ),
            reduced,
        ],
        error_conditions=[
            ErrorCondition(
                "div_by_zero_error",
                "DivisionByZeroError when dividing by a zero Rational",
                lambda a, b: b == 0,
                DivisionByZeroError,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "as_decimal_truncates",
                f"as_decimal({DECIMAL_PRECISION}) truncates toward zero", 2,
                lambda a, b: (
                    b == 0
                    or Rational(a, b).as_decimal(DECIMAL_PRECISION)
                    == decimal_oracle(a, b, DECIMAL_PRECISION)
                ),
            ),
            AlgebraicProperty(
                "construction_reduces", "Rational(a, b) is reduced and equals Fraction(a, b)", 2,
                lambda a, b: (
                    b == 0
                    or (is_reduced(Rational(a, b)) and str(Rational(a, b)) == str(Fraction(a, b)))
                ),
            ),
            AlgebraicProperty(
                "string_round_trip", "Rational(str(p)) == p", 2,
                lambda a, b: b == 0 or Rational(str(Rational(a, b))) == Rational(a, b),
            ),
        ],
    )

    # -------------------------------------------------------------- branches
    branches = [
        # Canonical form (_trim / _canonify)
        BranchPoint("CANON-TRIM", "Most significant zero digits dropped",
                    "len(digits) > 1 and digits[-1] == 0", "canonify"),
        BranchPoint("CANON-ZERO-SIGN", "Zero forced non-negative",
                    "digits == [0]", "canonify"),
        # Addition / subtraction
        BranchPoint("ADD-SAME-SIGN", "Magnitudes added with carry",
                    "x.sign == y.sign", "add"),
        BranchPoint("ADD-CANCEL", "Opposite signs, equal magnitudes give zero",
                    "x.sign != y.sign and |x| == |y|", "add"),
        BranchPoint("ADD-LEFT-LARGER", "Opposite signs, left magnitude wins",
                    "x.sign != y.sign and |x| > |y|", "add"),
        BranchPoint("ADD-RIGHT-LARGER", "Opposite signs, right magnitude wins",
                    "x.sign != y.sign and |x| < |y|", "add"),
        # Multiplication
        BranchPoint("MUL-TEN-SHIFT", "Multiplication by ten as a digit shift",
                    "|y| == 10", "mul"),
        BranchPoint("MUL-SCHOOLBOOK", "General schoolbook multiplication",
                    "|y| != 10", "mul"),
        # Division / modulo
        BranchPoint("DIV-ZERO-ERROR", "DivisionByZeroError on a zero divisor",
                    "y == 0", "div"),
        BranchPoint("DIV-ZERO-DIVIDEND", "Zero dividend gives zero",
                    "x == 0 and y != 0", "div"),
        BranchPoint("DIV-SMALL-DIVIDEND", "Dividend smaller than divisor gives zero",
                    "0 < |x| < |y|", "div"),
        BranchPoint("DIV-LONG", "Digit-by-digit long division",
                    "|x| >= |y| > 0", "div"),
        BranchPoint("MOD-ZERO-ERROR", "DivisionByZeroError on a zero divisor",
                    "y == 0", "mod"),
        BranchPoint("MOD-ZERO-DIVIDEND", "Zero dividend gives zero",
                    "x == 0 and y != 0", "mod"),
        BranchPoint("MOD-REMAINDER", "x - (x / y) * y",
                    "x != 0 and y != 0", "mod"),
        # Comparison
        BranchPoint("CMP-SIGN", "Signs differ, negative is smaller",
                    "x.sign != y.sign", "compare"),
        BranchPoint("CMP-LENGTH", "Same sign, digit counts differ",
                    "len(x) != len(y)", "compare"),
        BranchPoint("CMP-DIGITS", "Same sign and length, digits compared",
                    "len(x) == len(y)", "compare"),
        # Rational
        BranchPoint("RAT-DIV-ZERO", "DivisionByZeroError dividing by zero",
                    "q.numerator == 0", "rational_div"),
        BranchPoint("RAT-SIGN-FLIP", "Negative denominator moved to numerator",
                    "denominator < 0 after reduction", "rational_reduce"),
        BranchPoint("DEC-INTEGER", "Precision 0 prints the truncated integer part",
                    "precision == 0", "as_decimal"),
        BranchPoint("DEC-PAD", "Quotient shorter than precision is zero padded",
                    "len(scaled) <= precision", "as_decimal"),
        BranchPoint("DEC-SPLIT", "Point inserted precision digits from the right",
                    "len(scaled) > precision", "as_decimal"),
    ]

    return ArithmeticContract(
        bounds=bounds,
        operations={
            "add": add_contract,
            "sub": sub_contract,
            "mul": mul_contract,
            "div": div_contract,
            "mod": mod_contract,
            "compare": compare_contract,
            "rational_add": rational_add_contract,
            "rational_mul": rational_mul_contract,
            "rational_div": rational_div_contract,
        },
        branches=branches,
    )


def _self_add(a: int) -> BigInteger:
    x = BigInteger(a)
    x += x
    return x
