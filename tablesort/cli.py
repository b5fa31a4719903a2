#!/usr/bin/env python3

from __future__ import annotations

import argparse
from pathlib import Path

from .commands.factory import CommandFactory
from .core.sorter_registry import SorterRegistry


class CliApplication:
    def __init__(self, project_root: Path) -> None:
        self._factory = CommandFactory(project_root)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="tablesort",
            description="Sort and compare human-readable table values",
        )
        subparsers = parser.add_subparsers(dest="action", required=True)

        sort_parser = subparsers.add_parser(
            "sort",
            help="Sort a delimited table by one column.",
        )
        sort_parser.add_argument(
            "table_file",
            help="Path to the table file, or - for stdin.",
        )
        sort_parser.add_argument(
            "env_file",
            nargs="?",
            default=None,
            help="Optional path to env file (default: config/tablesort.env)",
        )

        compare_parser = subparsers.add_parser(
            "compare",
            help="Compare two values with a named sorter.",
        )
        compare_parser.add_argument(
            "sorter",
            help=f"Sorter name ({', '.join(SorterRegistry.names())}).",
        )
        compare_parser.add_argument("left")
        compare_parser.add_argument("right")

        parse_parser = subparsers.add_parser(
            "parse",
            help="Parse a human-readable value into a number.",
        )
        parse_parser.add_argument("kind", choices=("bytes", "int"))
        parse_parser.add_argument("value")
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        if args.action == "sort":
            command = self._factory.create("sort", [args.table_file], args.env_file)
        elif args.action == "compare":
            command = self._factory.create("compare", [args.sorter, args.left, args.right])
        else:
            command = self._factory.create("parse", [args.kind, args.value])
        return command.run()


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    app = CliApplication(project_root)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
