"""Menu-numbered unit conversions for length and pressure."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import NamedTuple


class Conversion(NamedTuple):
    """One menu entry: the unit converted from, the unit converted to, and how."""

    source: str
    target: str
    apply: Callable[[float, float], float]
    factor: float

    def __call__(self, value: float) -> float:
        return self.apply(value, self.factor)


_MUL = operator.mul
_DIV = operator.truediv

LENGTH_CONVERSIONS: dict[int, Conversion] = {
    1: Conversion("kilometre", "metre", _MUL, 1000),
    2: Conversion("metre", "kilometre", _DIV, 1000),
    3: Conversion("metre", "centimetre", _MUL, 100),
    4: Conversion("centimetre", "metre", _DIV, 100),
    5: Conversion("kilometre", "centimetre", _MUL, 100000),
    6: Conversion("centimetre", "kilometre", _DIV, 100000),
    7: Conversion("centimetre", "millimetre", _MUL, 10),
    8: Conversion("millimetre", "centimetre", _DIV, 10),
    9: Conversion("foot", "inch", _MUL, 12),
    10: Conversion("inch", "foot", _DIV, 12),
    11: Conversion("inch", "centimetre", _MUL, 2.54),
    12: Conversion("centimetre", "inch", _MUL, 0.394),
}

PRESSURE_CONVERSIONS: dict[int, Conversion] = {
    1: Conversion("hectopascal", "megapascal", _DIV, 10000),
    2: Conversion("megapascal", "hectopascal", _MUL, 10000),
    3: Conversion("millimetre of Hg", "millibar", _MUL, 1.333),
    4: Conversion("millibar", "millimetre of Hg", _MUL, 0.75),
    5: Conversion("inch of Hg", "bar", _MUL, 0.034),
    6: Conversion("bar", "inch of Hg", _MUL, 29.53),
    7: Conversion("kilopascal", "bar", _DIV, 100),
    8: Conversion("bar", "kilopascal", _MUL, 100),
    9: Conversion("standard pressure (atm)", "pounds/square inch", _MUL, 14.695),
    10: Conversion("pounds/square inch", "standard pressure (atm)", _MUL, 0.068),
    11: Conversion("standard pressure (atm)", "bar", _MUL, 1.013),
    12: Conversion("bar", "standard pressure (atm)", _MUL, 0.987),
}


def _convert(table: dict[int, Conversion], kind: str, option: int, value: float) -> float:
    try:
        conversion = table[option]
    except KeyError:
        raise ValueError(f"invalid {kind} option {option!r}") from None
    return conversion(value)


def convert_length(option: int, value: float) -> float:
    """Convert *value* by the length conversion numbered *option* (1-12)."""
    return _convert(LENGTH_CONVERSIONS, "length", option, value)


def convert_pressure(option: int, value: float) -> float:
    """Convert *value* by the pressure conversion numbered *option* (1-12)."""
    return _convert(PRESSURE_CONVERSIONS, "pressure", option, value)