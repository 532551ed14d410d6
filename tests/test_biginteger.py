"""Unit tests for BigInteger: construction, arithmetic, ordering, conversions."""
from __future__ import annotations

import pytest

from bignum.biginteger import BigInteger
from bignum.exceptions import DivisionByZeroError, MalformedInputError

INT128_MAX = "170141183460469231731687303715884105727"
GOOGOL = "1" + "0" * 100


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_default_is_zero(self):
        assert str(BigInteger()) == "0"
        assert BigInteger().digits == (0,)

    def test_from_positive_int(self):
        x = BigInteger(1203)
        assert x.digits == (3, 0, 2, 1)
        assert not x.is_negative

    def test_from_negative_int(self):
        x = BigInteger(-45)
        assert x.digits == (5, 4)
        assert x.is_negative

    def test_from_zero_int(self):
        assert BigInteger(0).digits == (0,)
        assert BigInteger(0).is_positive

    def test_from_string(self):
        x = BigInteger("-9876543210")
        assert x.is_negative
        assert x.digits == (0, 1, 2, 3, 4, 5, 6, 7, 8, 9)

    def test_negative_zero_string_is_zero(self):
        x = BigInteger("-0")
        assert x == BigInteger(0)
        assert str(x) == "0"
        assert not x.is_negative

    def test_leading_zeros_are_trimmed(self):
        assert BigInteger("000120").digits == (0, 2, 1)
        assert str(BigInteger("-000")) == "0"

    def test_copy_constructor(self):
        original = BigInteger("-123")
        copy = BigInteger(original)
        assert copy == original
        assert copy is not original

    def test_huge_native_int(self):
        assert str(BigInteger(2 ** 200)) == str(2 ** 200)

    @pytest.mark.parametrize("text", ["", "-", "12a", "1.5", "+3", " 7", "--1", "1-"])
    def test_malformed_string(self, text):
        with pytest.raises(MalformedInputError) as info:
            BigInteger(text)
        assert info.value.token == text

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            BigInteger("abc")

    @pytest.mark.parametrize("value", [1.5, None, [1, 2], b"12"])
    def test_unsupported_type(self, value):
        with pytest.raises(TypeError):
            BigInteger(value)


# ---------------------------------------------------------------------------
# Addition / subtraction
# ---------------------------------------------------------------------------

class TestAddition:
    def test_int128_max_plus_one(self, int128_max):
        assert str(int128_max + 1) == "170141183460469231731687303715884105728"

    def test_carry_extends_length(self):
        assert str(BigInteger("999") + BigInteger("1")) == "1000"

    def test_mixed_signs_left_larger(self):
        assert str(BigInteger(100) + BigInteger(-1)) == "99"

    def test_mixed_signs_right_larger(self):
        assert str(BigInteger(1) + BigInteger(-100)) == "-99"

    def test_cancellation_is_non_negative_zero(self):
        result = BigInteger("-12345678901234567890") + BigInteger("12345678901234567890")
        assert str(result) == "0"
        assert not result.is_negative

    def test_self_addition_doubles(self):
        x = BigInteger("5000000000000000000000")
        x += x
        assert str(x) == "10000000000000000000000"

    def test_self_addition_negative(self):
        x = BigInteger(-7)
        x += x
        assert x == -14

    def test_subtraction(self):
        assert str(BigInteger(1000) - BigInteger(1)) == "999"
        assert str(BigInteger(1) - BigInteger(1000)) == "-999"
        assert str(BigInteger(-5) - BigInteger(-5)) == "0"

    def test_x_minus_x_is_zero(self, googol):
        assert googol - googol == 0

    def test_reflected_operators(self):
        assert 3 + BigInteger(4) == 7
        assert 3 - BigInteger(4) == -1

    def test_increment_and_decrement(self):
        x = BigInteger(-1)
        x += 1
        assert x == 0
        x -= 1
        assert x == -1


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------

class TestMultiplication:
    def test_schoolbook(self):
        assert str(BigInteger(12345) * BigInteger(6789)) == str(12345 * 6789)

    def test_large(self, int128_max):
        assert str(int128_max * int128_max) == str((2 ** 127 - 1) ** 2)

    def test_signs(self):
        assert BigInteger(-3) * BigInteger(4) == -12
        assert BigInteger(3) * BigInteger(-4) == -12
        assert BigInteger(-3) * BigInteger(-4) == 12

    def test_negative_times_zero_is_non_negative(self):
        result = BigInteger(-123) * BigInteger(0)
        assert str(result) == "0"
        assert not result.is_negative

    def test_times_ten_matches_general(self):
        x = BigInteger("-98765432109876543210")
        assert x * BigInteger(10) == BigInteger(10) * x
        assert str(x * 10) == "-987654321098765432100"

    def test_zero_times_ten(self):
        assert (BigInteger(0) * 10).digits == (0,)

    def test_times_minus_ten(self):
        assert BigInteger(7) * BigInteger(-10) == -70

    def test_reflected(self):
        assert 6 * BigInteger(7) == 42


# ---------------------------------------------------------------------------
# Division / modulo
# ---------------------------------------------------------------------------

class TestDivision:
    def test_large_by_three(self):
        x = BigInteger("1000000000000000000000")
        assert str(x / BigInteger(3)) == "333333333333333333333"
        assert str(x % BigInteger(3)) == "1"

    @pytest.mark.parametrize("a, b, q, r", [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
        (1, 5, 0, 1),
        (-1, 5, 0, -1),
        (0, 5, 0, 0),
        (100, 100, 1, 0),
    ])
    def test_truncating(self, a, b, q, r):
        assert BigInteger(a) / BigInteger(b) == q
        assert BigInteger(a) % BigInteger(b) == r
        assert divmod(BigInteger(a), BigInteger(b)) == (q, r)

    def test_quotient_with_inner_zero_digits(self):
        assert str(BigInteger("100200300") / BigInteger(100)) == "1002003"

    def test_division_identity(self, googol, int128_max):
        q, r = divmod(googol, int128_max)
        assert q * int128_max + r == googol

    def test_division_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            BigInteger(5) / BigInteger(0)

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            BigInteger(5) / 0

    def test_modulo_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            BigInteger(5) % BigInteger(0)

    def test_zero_modulo_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            BigInteger(0) % BigInteger(0)

    def test_error_carries_dividend(self):
        with pytest.raises(DivisionByZeroError) as info:
            BigInteger(-9) / 0
        assert info.value.dividend == -9

    def test_reflected(self):
        assert 7 / BigInteger(2) == 3
        assert 7 % BigInteger(2) == 1
        assert divmod(-7, BigInteger(2)) == (-3, -1)

    def test_floor_division_is_not_defined(self):
        with pytest.raises(TypeError):
            BigInteger(7) // BigInteger(2)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

class TestComparison:
    @pytest.mark.parametrize("a, b", [
        (-1, 0), (0, 1), (-10, -9), (9, 10), (-100, 5), (123, 124), (-124, -123),
    ])
    def test_strict_order(self, a, b):
        x, y = BigInteger(a), BigInteger(b)
        assert x < y and y > x
        assert x <= y and y >= x
        assert x != y

    def test_equal(self):
        assert BigInteger("000042") == BigInteger(42)
        assert BigInteger(42) <= BigInteger(42)
        assert BigInteger(42) >= BigInteger(42)

    def test_mixed_with_int(self):
        assert BigInteger(5) == 5
        assert 5 == BigInteger(5)
        assert BigInteger(5) < 6
        assert 4 < BigInteger(5)

    def test_not_equal_to_other_types(self):
        assert BigInteger(5) != "5"
        assert (BigInteger(5) == "5") is False

    def test_ordering_other_types_raises(self):
        with pytest.raises(TypeError):
            BigInteger(5) < "6"

    def test_sorting(self):
        values = [BigInteger(v) for v in (3, -20, 0, 100, -3)]
        assert [int(v) for v in sorted(values)] == [-20, -3, 0, 3, 100]

    def test_hash_matches_int(self):
        assert hash(BigInteger(-77)) == hash(-77)
        assert {BigInteger(1): "a"}[1] == "a"


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

class TestConversions:
    def test_str(self):
        assert str(BigInteger(-120)) == "-120"
        assert str(BigInteger(0)) == "0"

    def test_repr(self):
        assert repr(BigInteger(-3)) == "BigInteger('-3')"

    def test_format_pads_string_form(self):
        assert f"{BigInteger(-42):>6}" == "   -42"
        assert format(BigInteger(7)) == "7"

    @pytest.mark.parametrize("value, spec, expected", [
        (1234567, ",", "1,234,567"),
        (-1234567, "_", "-1_234_567"),
        (123, ",", "123"),
        (5, "+d", "+5"),
        (5, " d", " 5"),
        (-5, "+", "-5"),
        (-42, "08", "-0000042"),
        (42, "*=+6", "+***42"),
        (1234567, ">12,", "   1,234,567"),
        (42, "^6", "  42  "),
        (5, ">3s", "  5"),
        (0, "d", "0"),
    ])
    def test_format_integer_specs(self, value, spec, expected):
        assert format(BigInteger(value), spec) == expected

    def test_format_groups_beyond_native_str_limit(self):
        text = format(BigInteger("9" * 5000), ",")
        assert text.count(",") == 1666
        assert text.startswith("99,999,")
        assert text.replace(",", "") == "9" * 5000

    @pytest.mark.parametrize("spec", ["x", ".2f", "e", ",,", "5.1"])
    def test_format_rejects_non_integer_specs(self, spec):
        with pytest.raises(ValueError):
            format(BigInteger(10), spec)

    def test_bool(self):
        assert not BigInteger(0)
        assert not BigInteger("-0")
        assert BigInteger(-1)

    def test_abs(self):
        assert abs(BigInteger(-5)) == 5
        assert BigInteger(-5).abs() == 5
        assert abs(BigInteger(5)) == 5

    def test_negation(self):
        assert -BigInteger(5) == -5
        assert not (-BigInteger(0)).is_negative
        assert +BigInteger(5) == 5

    def test_int(self):
        assert int(BigInteger(GOOGOL)) == 10 ** 100
        assert int(BigInteger("-" + INT128_MAX)) == -(2 ** 127 - 1)

    def test_len_counts_digits(self):
        assert len(BigInteger(-12345)) == 5
        assert len(BigInteger(0)) == 1

    def test_shift(self):
        assert str(BigInteger(-12).shift(3)) == "-12000"
        assert BigInteger(0).shift(5).digits == (0,)
        assert BigInteger(7).shift(0) == 7

    def test_shift_negative_places(self):
        with pytest.raises(ValueError):
            BigInteger(7).shift(-1)
