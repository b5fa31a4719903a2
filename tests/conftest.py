from __future__ import annotations

from pathlib import Path

import pytest

from tablesort.core.sort_config import SortConfig


class StaticReader:
    def __init__(self, rows: list[list[str]]) -> None:
        self._rows = rows
        self.calls: list[tuple[Path | None, str]] = []

    def read_rows(self, source: Path | None, delimiter: str) -> list[list[str]]:
        self.calls.append((source, delimiter))
        return [list(row) for row in self._rows]


@pytest.fixture
def server_rows() -> list[list[str]]:
    return [
        ["name", "memory", "tablets", "last heartbeat"],
        ["ts-1", "1.5G", "1.2k", "2019-09-06 19:56:46 CST"],
        ["ts-2", "512M", "985", "2019-09-06 19:56:47 CST"],
        ["ts-3", "", "12.5k", "unknown"],
        ["ts-4", "2T", "3M", "2019-09-05 23:59:59 CST"],
    ]


@pytest.fixture
def sample_config(tmp_path: Path) -> SortConfig:
    return SortConfig(
        project_root=tmp_path,
        env_file=None,
        sort_column=1,
        sorter="bytes",
        delimiter="\t",
        has_header=True,
        reverse=False,
    )
