from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SorterProtocol(Protocol):
    def __call__(self, left: str, right: str) -> int:
        ...


class TableReaderProtocol(Protocol):
    def read_rows(self, source: Path | None, delimiter: str) -> list[list[str]]:
        ...
