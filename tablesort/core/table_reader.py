from __future__ import annotations

import sys
from pathlib import Path


class TableReader:
    def read_rows(self, source: Path | None, delimiter: str) -> list[list[str]]:
        if source is None:
            text = sys.stdin.read()
        else:
            if not source.is_file():
                raise SystemExit(f"Missing table file: {source}")
            text = source.read_text(encoding="utf-8")
        return [line.split(delimiter) for line in text.splitlines() if line]
