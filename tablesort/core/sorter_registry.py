from __future__ import annotations

import functools
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from .comparators import bytes_sorter, floats_sorter, numeric_strings_sorter, strings_sorter
from .protocols import SorterProtocol
from .time_comparator import times_sorter


class SorterRegistry:
    _sorters = MappingProxyType(
        {
            "bytes": bytes_sorter,
            "floats": floats_sorter,
            "numeric": numeric_strings_sorter,
            "times": times_sorter,
            "strings": strings_sorter,
        }
    )
    # Callback names used by the web table templates.
    _aliases = MappingProxyType(
        {
            "bytesSorter": "bytes",
            "floatsSorter": "floats",
            "numericStringsSorter": "numeric",
            "timesSorter": "times",
            "stringsSorter": "strings",
        }
    )

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._sorters)

    @classmethod
    def resolve(cls, name: str) -> str:
        canonical = cls._aliases.get(name, name)
        if canonical not in cls._sorters:
            choices = ", ".join(cls.names())
            raise SystemExit(f"Unknown sorter: {name} (expected one of: {choices})")
        return canonical

    @classmethod
    def get(cls, name: str) -> SorterProtocol:
        return cls._sorters[cls.resolve(name)]

    @classmethod
    def sort_key(cls, name: str) -> Callable[[str], Any]:
        return functools.cmp_to_key(cls.get(name))
