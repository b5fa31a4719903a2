from __future__ import annotations

from ..core.sorter_registry import SorterRegistry
from .base import Command


class CompareCommand(Command):
    def __init__(self, sorter: str, left: str, right: str) -> None:
        self._sorter = SorterRegistry.get(sorter)
        self._left = left
        self._right = right

    def run(self) -> int:
        print(self._sorter(self._left, self._right))
        return 0
