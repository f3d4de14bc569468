"""
Shell Exceptions

Exceptions raised while turning a command line into a pipeline and
while running it. These are construction-time faults: a pipeline that
fails to build is never run.

Author: pipesh developers
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all shell and pipeline errors.

    Attributes:
        message: Human-readable error description
        command: Command name associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = command
        self.error_code = error_code or 2000
        self.context = dict(context or {})
        if command:
            self.context["command"] = command

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"command={self.command!r}, "
            f"error_code={self.error_code})"
        )


class CommandNotFoundError(ShellException):
    """
    The command name is not in the command catalog.

    Example:
        >>> raise CommandNotFoundError("frobnicate")
    """

    def __init__(
        self,
        command: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{command}: command not found",
            command=command,
            error_code=2001,
            context=context
        )


class UsageError(ShellException):
    """
    A command was given the wrong number of arguments.

    Example:
        >>> raise UsageError("grep", "grep pattern", got=0)
    """

    def __init__(
        self,
        command: str,
        usage: str,
        got: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if got is not None:
            ctx["arguments"] = got
        super().__init__(
            message=f"{command}: usage: {usage}",
            command=command,
            error_code=2002,
            context=ctx
        )
        self.usage = usage


class InvalidPatternError(ShellException):
    """
    A grep pattern failed to compile.

    Example:
        >>> raise InvalidPatternError("a(", reason="missing )")
    """

    def __init__(
        self,
        pattern: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        ctx["pattern"] = pattern
        message = f"grep: invalid pattern: {pattern}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            command="grep",
            error_code=2003,
            context=ctx
        )
        self.pattern = pattern


class DirectoryReadError(ShellException):
    """A directory could not be listed."""

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        ctx["path"] = path
        message = f"ls: cannot read directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            command="ls",
            error_code=2004,
            context=ctx
        )
        self.path = path


class ChangeDirectoryError(ShellException):
    """The working directory could not be changed."""

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        ctx["path"] = path
        message = f"cd: cannot change directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            command="cd",
            error_code=2005,
            context=ctx
        )
        self.path = path
