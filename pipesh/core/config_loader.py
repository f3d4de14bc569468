"""
pipesh Configuration Loader

Configuration management for the shell:
- JSON configuration file loading
- Validation of enumerated settings
- Default value handling
- Runtime configuration updates with dot-notation keys

Author: pipesh developers
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional
import threading

from pipesh.exceptions import ConfigValidationError


MISSING_FILE_POLICIES = ("error", "skip")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = "$ "
    show_cwd: bool = True
    history_size: int = 1000
    missing_file_policy: str = "error"  # "error" or "skip"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the shell.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    A process-wide singleton: every ``ConfigLoader()`` call returns the
    same instance, so the shell and its stages see one configuration.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('pipesh.json')
        >>> print(config.shell.prompt)
        $
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigValidationError: If the file cannot be loaded, parsed
                or contains invalid values
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {config_path}"
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in configuration file: {e}"
            )
        except OSError as e:
            raise ConfigValidationError(
                f"Cannot read configuration file: {e}"
            )

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration file must contain a JSON object"
            )

        config = self._parse_config(data)
        self._validate(config)

        self._config = config
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'shell' in data:
            shell_data = self._section(data, 'shell')
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
                show_cwd=shell_data.get('show_cwd', config.shell.show_cwd),
                history_size=shell_data.get('history_size', config.shell.history_size),
                missing_file_policy=shell_data.get(
                    'missing_file_policy', config.shell.missing_file_policy
                ),
            )

        if 'logging' in data:
            log_data = self._section(data, 'logging')
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        return config

    @staticmethod
    def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
        section = data[key]
        if not isinstance(section, dict):
            raise ConfigValidationError(
                f"Configuration section must be a JSON object: {key}",
                key=key
            )
        return section

    @staticmethod
    def _validate(config: Config) -> None:
        if config.shell.missing_file_policy not in MISSING_FILE_POLICIES:
            raise ConfigValidationError(
                f"Invalid missing file policy: {config.shell.missing_file_policy!r}",
                key="shell.missing_file_policy"
            )
        if str(config.logging.level).upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level: {config.logging.level!r}",
                key="logging.level"
            )
        history_size = config.shell.history_size
        # bool is an int subclass; JSON true must not pass as a size.
        if isinstance(history_size, bool) or not isinstance(history_size, int) or history_size < 0:
            raise ConfigValidationError(
                f"Invalid history size: {config.shell.history_size!r}",
                key="shell.history_size"
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        The change is validated but not persisted to disk.

        Raises:
            ConfigValidationError: If the key does not exist or the value
                is invalid
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, '__dataclass_fields__') or final_key not in {f.name for f in fields(obj)}:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            self._validate(self._config)
        except ConfigValidationError:
            setattr(obj, final_key, previous)
            raise

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
