"""Pure integer arithmetic for the MONAD evaluator.

Every function is stateless and operates on plain Python ints.

The ALU the puzzle models divides and takes remainders like a signed machine
integer: the quotient truncates toward zero and the remainder takes the sign of
the dividend. Python's `//` and `%` floor toward -inf instead, so the two
disagree for negative dividends (`-1 // 26 == -1`, `-1 % 26 == 25`). The
helpers below restore the truncating convention.
"""

from __future__ import annotations

BASE: int = 26


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def trunc_div(x: int, d: int) -> int:
    """
    Signed integer division truncating toward zero.

    trunc_div(7, 26) == 0, trunc_div(-1, 26) == 0, trunc_div(-27, 26) == -1
    """
    require_int("x", x)
    require_int("d", d)
    if d == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(x) // abs(d)
    return q if (x >= 0) == (d > 0) else -q


def trunc_rem(x: int, d: int) -> int:
    """
    Remainder matching `trunc_div`.

    Satisfies x == trunc_div(x, d) * d + trunc_rem(x, d), and the result has the
    sign of x (or is 0).
    """
    return x - trunc_div(x, d) * d


def to_number(digits) -> int:
    """Render a digit sequence as a base-10 integer (most significant first)."""
    n = 0
    for i, digit in enumerate(digits):
        require_int(f"digits[{i}]", digit)
        n = n * 10 + digit
    return n
