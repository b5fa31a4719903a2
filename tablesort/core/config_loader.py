from __future__ import annotations

import os
from pathlib import Path

from .sort_config import SortConfig
from .sorter_registry import SorterRegistry


class ConfigLoader:
    _truthy = ("1", "true", "yes", "on")
    _falsy = ("0", "false", "no", "off")

    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def default_env_file(self) -> Path:
        return self._project_root / "config" / "tablesort.env"

    def load(self, env_path: str | None = None) -> SortConfig:
        if env_path:
            env_file: Path | None = Path(env_path).expanduser()
            if not env_file.is_file():
                raise SystemExit(f"Missing env file: {env_file}")
        elif self.default_env_file.is_file():
            env_file = self.default_env_file
        else:
            env_file = None

        env_values = self._parse_env_file(env_file) if env_file else {}

        return SortConfig(
            project_root=self._project_root,
            env_file=env_file,
            sort_column=self._parse_column(env_values.get("SORT_COLUMN", "0")),
            sorter=SorterRegistry.resolve(env_values.get("SORTER", "strings")),
            delimiter=self._parse_delimiter(env_values.get("DELIMITER", "\\t")),
            has_header=self._parse_bool("HAS_HEADER", env_values.get("HAS_HEADER", "true")),
            reverse=self._parse_bool("REVERSE", env_values.get("REVERSE", "false")),
        )

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values

    def _parse_column(self, value: str) -> int:
        try:
            column = int(value)
        except ValueError as exc:
            raise SystemExit(f"Invalid SORT_COLUMN: {value}") from exc
        if column < 0:
            raise SystemExit(f"SORT_COLUMN must not be negative: {value}")
        return column

    def _parse_delimiter(self, value: str) -> str:
        if value in ("\\t", "tab"):
            return "\t"
        if not value:
            raise SystemExit("DELIMITER must not be empty")
        return value

    def _parse_bool(self, name: str, value: str) -> bool:
        lowered = value.lower()
        if lowered in self._truthy:
            return True
        if lowered in self._falsy:
            return False
        raise SystemExit(f"Invalid {name} value: {value}")
