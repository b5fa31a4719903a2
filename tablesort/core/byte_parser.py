from __future__ import annotations

import math

from .number_parsing import parse_leading_float


class ByteValueParser:
    # Each unit is 1024 times the one before it.
    units = ("B", "K", "M", "G", "T", "P", "E", "Z", "Y")
    _step = 1024.0

    @classmethod
    def to_num_bytes(cls, value: str) -> float:
        """Convert a string like ``'1.23B'`` or ``'985.32M'`` to bytes.

        The unit suffix is mandatory: ``'1.23'`` is rejected. Returns -1 on
        any failure.
        """
        if len(value) <= 1:
            return -1
        number = parse_leading_float(value[:-1])
        if math.isnan(number):
            return -1
        try:
            level = cls.units.index(value[-1])
        except ValueError:
            return -1
        for _ in range(level):
            number *= cls._step
        return number


def to_num_bytes(value: str) -> float:
    return ByteValueParser.to_num_bytes(value)
