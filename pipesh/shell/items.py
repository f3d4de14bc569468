"""
Pipeline Items Module

Defines the units that flow between pipeline stages.

Author: pipesh developers
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum, auto


class ItemKind(Enum):
    """
    Kinds of pipeline items.

    Only DATA items are ever inspected, filtered or transformed by a
    stage. Every other kind is forwarded unchanged to the runner.
    """

    DATA = auto()
    """One line of text."""

    ERROR = auto()
    """A fault raised while the pipeline runs; carries a message."""

    EOF = auto()
    """The stage has no more items."""

    EXIT = auto()
    """Session termination requested by ``exit``; ends the shell loop."""


@dataclass(frozen=True)
class Item:
    """A single item pulled from a stage."""
    kind: ItemKind
    text: str = ""

    @classmethod
    def data(cls, text: str) -> 'Item':
        return cls(ItemKind.DATA, text)

    @classmethod
    def error(cls, message: str) -> 'Item':
        return cls(ItemKind.ERROR, message)

    @classmethod
    def eof(cls) -> 'Item':
        return END_OF_STREAM

    @classmethod
    def exit(cls) -> 'Item':
        return EXIT_SESSION

    @property
    def is_data(self) -> bool:
        return self.kind is ItemKind.DATA

    @property
    def is_error(self) -> bool:
        return self.kind is ItemKind.ERROR

    @property
    def is_eof(self) -> bool:
        return self.kind is ItemKind.EOF

    @property
    def is_exit(self) -> bool:
        return self.kind is ItemKind.EXIT


END_OF_STREAM = Item(ItemKind.EOF)
EXIT_SESSION = Item(ItemKind.EXIT)
