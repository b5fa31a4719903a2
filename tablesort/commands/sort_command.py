from __future__ import annotations

import sys
from pathlib import Path

from ..core.protocols import TableReaderProtocol
from ..core.sort_config import SortConfig
from ..core.sorter_registry import SorterRegistry
from .base import Command


class SortCommand(Command):
    def __init__(
        self,
        config: SortConfig,
        reader: TableReaderProtocol,
        source: Path | None,
    ) -> None:
        self._config = config
        self._reader = reader
        self._source = source

    def run(self) -> int:
        rows = self._reader.read_rows(self._source, self._config.delimiter)
        header: list[list[str]] = []
        if self._config.has_header and rows:
            header, rows = rows[:1], rows[1:]

        key = SorterRegistry.sort_key(self._config.sorter)
        column = self._config.sort_column
        ordered = sorted(
            rows,
            key=lambda row: key(self._cell(row, column)),
            reverse=self._config.reverse,
        )

        for row in header + ordered:
            print(self._config.delimiter.join(row))
        print(
            f"Sorted {len(ordered)} rows on column {column} ({self._config.sorter})",
            file=sys.stderr,
        )
        return 0

    def _cell(self, row: list[str], column: int) -> str:
        return row[column] if column < len(row) else ""
