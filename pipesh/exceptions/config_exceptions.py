"""
Configuration Exceptions

Author: pipesh developers
Version: 1.0.0
"""

from typing import Optional, Any


class ConfigException(Exception):
    """
    Base exception for configuration errors.

    Attributes:
        message: Human-readable error description
        key: Configuration key or file involved (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.error_code = error_code or 3000
        self.context = dict(context or {})
        if key:
            self.context["key"] = key

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.key:
            base = f"{base} (key={self.key})"
        return base


class ConfigValidationError(ConfigException):
    """Raised when a configuration file or value is rejected."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            key=key,
            error_code=3001,
            context=context
        )
