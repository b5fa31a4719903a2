from __future__ import annotations

from .comparators import numeric_strings_sorter


class TimestampComparator:
    """Orders strings like ``'2019-09-06 19:56:46 CST'`` field by field.

    Time zones are ignored: every timestamp is assumed to come from the same
    zone. Strings too short to hold a full timestamp sort first.
    """

    MIN_LEN = 19
    # year, month, day, hour, minute, second
    fields = ((0, 4), (5, 7), (8, 10), (11, 13), (14, 16), (17, 19))

    def compare(self, left: str, right: str) -> int:
        left_short = len(left) < self.MIN_LEN
        right_short = len(right) < self.MIN_LEN
        if left_short and right_short:
            return 0
        if left_short:
            return -1
        if right_short:
            return 1

        for start, end in self.fields:
            result = numeric_strings_sorter(left[start:end], right[start:end])
            if result != 0:
                return result
        return 0


_comparator = TimestampComparator()


def times_sorter(left: str, right: str) -> int:
    return _comparator.compare(left, right)
