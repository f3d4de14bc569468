"""
Pipeline Stages Module

Implements the built-in commands as pull-driven pipeline stages.

Every stage answers one request, ``pull()``, with the next Item it
produces. Filters get their input by pulling the stage before them, so
pulling the last stage of a pipeline drives the whole chain. Stages do
their file and directory reads in the constructor; ``pull()`` touches
the filesystem only for ``cd``.

Stage kinds:
    Sources       Empty, Cat, Ls       never pull their predecessor
    Filters       Grep, Uniq           stream DATA through as it arrives
    Aggregators   Sort                 drain the predecessor first
    Commands      Cd, Exit             side effects, no DATA output

Author: pipesh developers
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Optional, List
import re

from .items import Item
from pipesh.core.config_loader import Config, get_config
from pipesh.exceptions import (
    UsageError,
    InvalidPatternError,
    DirectoryReadError,
    ChangeDirectoryError,
)
from pipesh.filesystem import read_lines, list_dir, set_cwd
from pipesh.logger import get_logger


def _reason(error: Exception) -> str:
    # ValueError comes from paths the OS cannot represent (embedded NUL).
    return getattr(error, 'strerror', None) or str(error)


class Stage(ABC):
    """
    Abstract base class for pipeline stages.

    Contract for ``pull()``:
    - DATA items always carry a line of text.
    - Once EOF has been returned, every later call returns EOF again.
    - ERROR, EOF and EXIT items received from the predecessor are
      returned unchanged; they are never filtered or delayed.
    """

    name = ''

    def __init__(self, previous: Optional['Stage']):
        self._previous = previous
        self._logger = get_logger('stages')

    @property
    def previous(self) -> Optional['Stage']:
        return self._previous

    @classmethod
    def create(cls, args: List[str], previous: Optional['Stage'], config: Config) -> 'Stage':
        """Construct the stage for a command line; config supplies any settings."""
        return cls(args, previous)

    @abstractmethod
    def pull(self) -> Item:
        """Produce the next item."""
        pass

    @classmethod
    def _check_args(
        cls,
        args: List[str],
        usage: str,
        minimum: int = 0,
        maximum: Optional[int] = 0
    ) -> None:
        """Raise UsageError unless minimum <= len(args) <= maximum."""
        if len(args) < minimum or (maximum is not None and len(args) > maximum):
            raise UsageError(cls.name, usage, got=len(args))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Empty(Stage):
    """The source placed in front of the first real stage. Always EOF."""

    name = 'empty'

    def __init__(self):
        super().__init__(None)

    def pull(self) -> Item:
        return Item.eof()


class _BufferedSource(Stage):
    """A source that replays items collected in its constructor."""

    def __init__(self, previous: Optional[Stage]):
        super().__init__(previous)
        self._items: List[Item] = []
        self._offset = 0

    def pull(self) -> Item:
        if self._offset >= len(self._items):
            return Item.eof()
        item = self._items[self._offset]
        self._offset += 1
        return item


class Cat(_BufferedSource):
    """
    Outputs the lines of each named file, file after file.

    A file that cannot be read is handled according to the
    ``missing_file_policy``:
        "error"  the file contributes one ERROR item in its position
        "skip"   the file contributes nothing
    """

    name = 'cat'

    def __init__(
        self,
        args: List[str],
        previous: Optional[Stage],
        missing_file_policy: Optional[str] = None
    ):
        super().__init__(previous)
        self._policy = missing_file_policy or get_config().shell.missing_file_policy

        for path in args:
            try:
                lines = read_lines(path)
            except (OSError, ValueError) as e:
                reason = _reason(e)
                self._logger.debug(
                    "Cannot read file",
                    context={'path': path, 'reason': reason, 'policy': self._policy}
                )
                if self._policy == 'error':
                    self._items.append(Item.error(f"cat: {path}: {reason}"))
                continue
            self._items.extend(Item.data(line) for line in lines)

    @classmethod
    def create(cls, args: List[str], previous: Optional[Stage], config: Config) -> 'Cat':
        return cls(args, previous, missing_file_policy=config.shell.missing_file_policy)


class Ls(_BufferedSource):
    """Outputs the sorted entry names of one directory."""

    name = 'ls'

    def __init__(self, args: List[str], previous: Optional[Stage]):
        super().__init__(previous)
        self._check_args(args, "ls [directory]", maximum=1)

        path = args[0] if args else None
        try:
            names = list_dir(path)
        except (OSError, ValueError) as e:
            raise DirectoryReadError(path or '.', reason=_reason(e)) from e

        self._items = [Item.data(name) for name in names]


class Grep(Stage):
    """Passes on the DATA lines matching a regular expression."""

    name = 'grep'

    def __init__(self, args: List[str], previous: Optional[Stage]):
        super().__init__(previous)
        self._check_args(args, "grep pattern", minimum=1, maximum=1)

        try:
            self._pattern = re.compile(args[0])
        except re.error as e:
            raise InvalidPatternError(args[0], reason=str(e)) from e

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def pull(self) -> Item:
        while True:
            item = self._previous.pull()
            if not item.is_data:
                return item
            if self._pattern.search(item.text):
                return item


class Sort(Stage):
    """
    Outputs all input lines in lexicographic order.

    Nothing is produced until the predecessor reaches EOF. An ERROR or
    EXIT item arriving before then is returned at once; the lines
    collected so far are kept and collection resumes on the next pull.
    """

    name = 'sort'

    def __init__(self, args: List[str], previous: Optional[Stage]):
        super().__init__(previous)
        self._check_args(args, "sort")
        self._lines: List[str] = []
        self._depleted = False
        self._offset = 0

    def pull(self) -> Item:
        while not self._depleted:
            item = self._previous.pull()
            if item.is_data:
                self._lines.append(item.text)
            elif item.is_eof:
                self._depleted = True
                self._lines.sort()
            else:
                return item

        if self._offset >= len(self._lines):
            return Item.eof()
        line = self._lines[self._offset]
        self._offset += 1
        return Item.data(line)


class Uniq(Stage):
    """Drops DATA lines equal to the line output just before them."""

    name = 'uniq'

    # No single line can contain a newline, so this never equals input.
    _NOTHING_YET = '\n'

    def __init__(self, args: List[str], previous: Optional[Stage]):
        super().__init__(previous)
        self._check_args(args, "uniq")
        self._last = self._NOTHING_YET

    def pull(self) -> Item:
        while True:
            item = self._previous.pull()
            if not item.is_data:
                return item
            if item.text != self._last:
                self._last = item.text
                return item


class Cd(Stage):
    """
    Changes the process working directory on the first pull.

    Outputs no data. The change is attempted at most once per stage; a
    failure raises ChangeDirectoryError out of ``pull()``.
    """

    name = 'cd'

    def __init__(self, args: List[str], previous: Optional[Stage]):
        super().__init__(previous)
        self._check_args(args, "cd directory", minimum=1, maximum=1)
        self._path: Optional[str] = args[0]

    def pull(self) -> Item:
        if self._path is None:
            return Item.eof()

        path, self._path = self._path, None
        try:
            cwd = set_cwd(path)
        except (OSError, ValueError) as e:
            raise ChangeDirectoryError(path, reason=_reason(e)) from e

        self._logger.debug("Working directory changed", context={'cwd': cwd})
        return Item.eof()


class Exit(Stage):
    """Requests the end of the shell session on every pull."""

    name = 'exit'

    def __init__(self, args: List[str], previous: Optional[Stage]):
        super().__init__(previous)
        self._check_args(args, "exit")

    def pull(self) -> Item:
        return Item.exit()
