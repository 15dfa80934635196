"""Tests for alu/core/monad/math.py - truncating integer arithmetic."""

import pytest

from alu.core.monad.math import BASE, to_number, trunc_div, trunc_rem


# ---------------------------------------------------------------------------
# trunc_div
# ---------------------------------------------------------------------------

class TestTruncDiv:
    def test_positive(self):
        assert trunc_div(8461, BASE) == 325

    def test_below_base(self):
        assert trunc_div(25, BASE) == 0

    def test_negative_truncates_toward_zero(self):
        assert trunc_div(-1, BASE) == 0
        assert trunc_div(-25, BASE) == 0
        assert trunc_div(-27, BASE) == -1

    def test_negative_divisor(self):
        assert trunc_div(27, -26) == -1
        assert trunc_div(-27, -26) == 1

    def test_zero_divisor(self):
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            trunc_div(True, 26)


# ---------------------------------------------------------------------------
# trunc_rem
# ---------------------------------------------------------------------------

class TestTruncRem:
    def test_positive(self):
        assert trunc_rem(325, BASE) == 13

    def test_negative_keeps_dividend_sign(self):
        assert trunc_rem(-1, BASE) == -1
        assert trunc_rem(-27, BASE) == -1

    def test_exact_multiple(self):
        assert trunc_rem(-52, BASE) == 0

    @pytest.mark.parametrize("x", [-700, -53, -26, -1, 0, 1, 25, 26, 8526])
    def test_division_identity(self, x):
        assert trunc_div(x, BASE) * BASE + trunc_rem(x, BASE) == x


# ---------------------------------------------------------------------------
# to_number
# ---------------------------------------------------------------------------

class TestToNumber:
    def test_digits(self):
        assert to_number((3, 9, 9, 2)) == 3992

    def test_empty(self):
        assert to_number(()) == 0

    def test_rejects_non_int(self):
        with pytest.raises(TypeError, match=r"digits\[1\]"):
            to_number([1, "2"])
