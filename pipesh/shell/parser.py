"""
Command Parser Module

Splits a command line into the stage specifications of a pipeline.

The grammar is deliberately small: ``|`` separates stages, runs of
spaces and tabs separate words. There is no quoting, escaping or
redirection.

Author: pipesh developers
Version: 1.0.0
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum


WORD_SEPARATORS = (' ', '\t')
PIPE = '|'


class TokenType(Enum):
    """Token types for command parsing."""
    WORD = "word"
    PIPE = "pipe"


@dataclass
class Token:
    """A parsed token."""
    type: TokenType
    value: str


@dataclass
class StageSpec:
    """
    The words of one pipeline stage.

    ``words[0]`` is the command name, the rest are its arguments. A spec
    with no words comes from an empty segment (``a || b``, a leading or
    trailing ``|``) and is skipped by the builder.
    """
    words: List[str] = field(default_factory=list)

    @property
    def command(self) -> Optional[str]:
        return self.words[0] if self.words else None

    @property
    def args(self) -> List[str]:
        return self.words[1:]

    @property
    def is_empty(self) -> bool:
        return not self.words


class CommandParser:
    """
    Parses shell command lines into stage specifications.

    Example:
        >>> parser = CommandParser()
        >>> [spec.words for spec in parser.parse("ls | grep a")]
        [['ls'], ['grep', 'a']]
    """

    def __init__(self, history_size: int = 1000):
        self._history: deque = deque(maxlen=history_size)

    def parse(self, line: str) -> List[StageSpec]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            One StageSpec per ``|``-separated segment, in order
        """
        line = line.rstrip('\r\n')

        if line.strip(''.join(WORD_SEPARATORS)):
            self._history.append(line)

        return self._parse_tokens(self.tokenize(line))

    def tokenize(self, line: str) -> List[Token]:
        """Convert a line into WORD and PIPE tokens."""
        tokens = []
        current = ""

        for char in line:
            if char == PIPE:
                if current:
                    tokens.append(Token(TokenType.WORD, current))
                    current = ""
                tokens.append(Token(TokenType.PIPE, PIPE))
            elif char in WORD_SEPARATORS:
                if current:
                    tokens.append(Token(TokenType.WORD, current))
                    current = ""
            else:
                current += char

        if current:
            tokens.append(Token(TokenType.WORD, current))

        return tokens

    def _parse_tokens(self, tokens: List[Token]) -> List[StageSpec]:
        """Group tokens into stage specifications."""
        specs = [StageSpec()]

        for token in tokens:
            if token.type == TokenType.PIPE:
                specs.append(StageSpec())
            else:
                specs[-1].words.append(token.value)

        return specs

    def get_history(self) -> List[str]:
        """Get command history."""
        return list(self._history)

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
