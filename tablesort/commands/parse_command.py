from __future__ import annotations

from types import MappingProxyType

from ..core.byte_parser import to_num_bytes
from ..core.scaled_int_parser import to_int
from .base import Command


class ParseCommand(Command):
    parsers = MappingProxyType(
        {
            "bytes": to_num_bytes,
            "int": to_int,
        }
    )

    def __init__(self, kind: str, value: str) -> None:
        if kind not in self.parsers:
            raise SystemExit(f"Unsupported parser: {kind}")
        self._parse = self.parsers[kind]
        self._value = value

    def run(self) -> int:
        print(self._parse(self._value))
        return 0
