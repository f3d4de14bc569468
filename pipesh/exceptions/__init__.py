"""
pipesh Exception Hierarchy

Architecture:
    ShellException (Base)
    ├── CommandNotFoundError
    ├── UsageError
    ├── InvalidPatternError
    ├── DirectoryReadError
    └── ChangeDirectoryError
    ConfigException (Base)
    └── ConfigValidationError

Runtime faults inside a running pipeline are not exceptions: they
travel through the stages as ERROR items (see pipesh.shell.items).
"""

from .shell_exceptions import (
    ShellException,
    CommandNotFoundError,
    UsageError,
    InvalidPatternError,
    DirectoryReadError,
    ChangeDirectoryError,
)

from .config_exceptions import (
    ConfigException,
    ConfigValidationError,
)

__all__ = [
    # Shell exceptions
    "ShellException",
    "CommandNotFoundError",
    "UsageError",
    "InvalidPatternError",
    "DirectoryReadError",
    "ChangeDirectoryError",
    # Config exceptions
    "ConfigException",
    "ConfigValidationError",
]
