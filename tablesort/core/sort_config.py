from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SortConfig:
    project_root: Path
    env_file: Path | None
    sort_column: int
    sorter: str
    delimiter: str
    has_header: bool
    reverse: bool
