from __future__ import annotations

from .byte_parser import ByteValueParser
from .number_parsing import parse_leading_float, strip_js_whitespace
from .scaled_int_parser import ScaledIntParser


def _compare(left: float | str, right: float | str) -> int:
    # NaN fails both tests and so compares equal to everything.
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def strings_sorter(left: str, right: str) -> int:
    return _compare(left, right)


def floats_sorter(left: str, right: str) -> int:
    return _compare(parse_leading_float(left), parse_leading_float(right))


def numeric_strings_sorter(left: str, right: str) -> int:
    """Compare human-readable counts such as ``'1.2k'`` and ``'985M'``."""
    return _compare(ScaledIntParser.to_int(left), ScaledIntParser.to_int(right))


def bytes_sorter(left: str, right: str) -> int:
    """Compare human-readable byte strings; empty cells sort first."""
    if not left and not right:
        return 0
    if not left:
        return -1
    if not right:
        return 1
    return _compare(
        ByteValueParser.to_num_bytes(strip_js_whitespace(left)),
        ByteValueParser.to_num_bytes(strip_js_whitespace(right)),
    )
