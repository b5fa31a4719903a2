from __future__ import annotations

from pathlib import Path

from ..core.config_loader import ConfigLoader
from ..core.protocols import TableReaderProtocol
from ..core.table_reader import TableReader
from .base import Command
from .compare_command import CompareCommand
from .parse_command import ParseCommand
from .sort_command import SortCommand


class CommandFactory:
    def __init__(
        self,
        project_root: Path,
        *,
        config_loader: ConfigLoader | None = None,
        reader: TableReaderProtocol | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader(project_root)
        self._reader = reader or TableReader()

    def create(self, action: str, args: list[str], env_file: str | None = None) -> Command:
        if action == "sort":
            config = self._config_loader.load(env_file)
            source = None if args[0] == "-" else Path(args[0]).expanduser()
            return SortCommand(config, self._reader, source)
        if action == "compare":
            return CompareCommand(*args)
        if action == "parse":
            return ParseCommand(*args)
        raise SystemExit(f"Unsupported action: {action}")
