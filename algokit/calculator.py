"""Four-function arithmetic on two operands."""

from __future__ import annotations

import operator as _op

_OPERATIONS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def calculate(operator: str, left: float, right: float) -> float:
    """Apply '+', '-', '*' or '/' to the two operands."""
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"invalid operator {operator!r}") from None
    if operator == "/" and right == 0:
        raise ZeroDivisionError("division by zero")
    return operation(left, right)