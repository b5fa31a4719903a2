from __future__ import annotations

import math

from .number_parsing import is_numeric_char, parse_leading_float


class ScaledIntParser:
    multipliers = {
        "k": 1e3,
        "M": 1e6,
        "B": 1e9,
        "T": 1e12,
    }

    @classmethod
    def to_int(cls, value: str) -> float:
        """Convert a string like ``'1.23k'`` or ``'985.32M'`` to an integer.

        Returns -1 if the string is empty, does not start with a number, or
        ends in anything other than a digit or a known suffix. Halves round
        away from zero.
        """
        if len(value) < 1:
            return -1
        number = parse_leading_float(value)
        if math.isnan(number):
            return -1
        end = value[-1]
        if end in cls.multipliers:
            number *= cls.multipliers[end]
        elif not is_numeric_char(end):
            return -1
        if math.isinf(number):
            return math.nan
        if number < 0:
            return math.trunc(number - 0.5)
        return math.trunc(number + 0.5)


def to_int(value: str) -> float:
    return ScaledIntParser.to_int(value)
