"""
Shared test helpers.
"""

import os
import tempfile
from typing import List, Optional

from pipesh.shell.items import Item
from pipesh.shell.stages import Stage, Empty


class FeedStage(Stage):
    """A source that returns the given items, then EOF forever."""

    name = 'feed'

    def __init__(self, items: List[Item], previous: Optional[Stage] = None):
        super().__init__(previous or Empty())
        self._items = list(items)
        self.pulls = 0

    def pull(self) -> Item:
        self.pulls += 1
        if self._items:
            return self._items.pop(0)
        return Item.eof()


def feed_lines(*lines: str) -> FeedStage:
    return FeedStage([Item.data(line) for line in lines])


def drain(stage: Stage, limit: int = 1000) -> List[Item]:
    """Pull until a non-DATA item, returning everything including it."""
    items = []
    for _ in range(limit):
        item = stage.pull()
        items.append(item)
        if not item.is_data:
            break
    return items


def texts(items: List[Item]) -> List[str]:
    return [item.text for item in items if item.is_data]


class WorkingDirectoryMixin:
    """Gives each test a temporary directory and restores the cwd."""

    def setUp(self):
        super().setUp()
        self._saved_cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = os.path.realpath(self._tmp.name)

    def tearDown(self):
        os.chdir(self._saved_cwd)
        self._tmp.cleanup()
        super().tearDown()

    def write_file(self, name: str, lines: List[str]) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as f:
            for line in lines:
                f.write(line + '\n')
        return path
