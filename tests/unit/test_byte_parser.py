from __future__ import annotations

import pytest

from tablesort.core.byte_parser import ByteValueParser, to_num_bytes


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1.23B", 1.23),
        ("0B", 0.0),
        ("1K", 1024),
        ("1M", 1024**2),
        ("2.5G", 2.5 * 1024**3),
        ("3T", 3 * 1024**4),
        ("1P", 1024**5),
        ("1E", 1024**6),
        ("1Z", 1024**7),
        ("1Y", 1024**8),
        ("-2K", -2048),
        (" 4K", 4096),
        ("1.5xK", 1.5 * 1024),
    ],
)
def test_to_num_bytes_valid(raw: str, expected: float) -> None:
    assert to_num_bytes(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "B", "1.23", "1Q", "1k", "1m", "KB", "abcM", "1 ", chr(0x663) + "K", chr(0xFF15) + "M"],
)
def test_to_num_bytes_invalid_returns_sentinel(raw: str) -> None:
    assert to_num_bytes(raw) == -1


def test_to_num_bytes_increases_with_each_unit() -> None:
    values = [ByteValueParser.to_num_bytes(f"1.5{unit}") for unit in ByteValueParser.units]

    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_to_num_bytes_skips_leading_byte_order_mark() -> None:
    assert to_num_bytes(chr(0xFEFF) + "1K") == 1024
