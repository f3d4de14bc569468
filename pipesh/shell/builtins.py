"""
Shell Built-in Commands

The command catalog and the builder that turns stage specifications
into a runnable pipeline.

Author: pipesh developers
Version: 1.0.0
"""

from typing import List, Optional, Type

from .parser import StageSpec
from .pipeline import Pipeline
from .stages import Stage, Empty, Cat, Ls, Grep, Sort, Uniq, Cd, Exit
from pipesh.core.config_loader import Config, get_config
from pipesh.exceptions import CommandNotFoundError, ShellException
from pipesh.logger import get_logger


class BuiltinCommands:
    """
    The closed set of commands the shell understands.

    Names are matched exactly and case-sensitively.
    """

    def __init__(self):
        self._commands: dict[str, Type[Stage]] = {
            'cat': Cat,
            'ls': Ls,
            'grep': Grep,
            'sort': Sort,
            'uniq': Uniq,
            'cd': Cd,
            'exit': Exit,
        }

    def get_commands(self) -> dict[str, Type[Stage]]:
        """Get all built-in commands."""
        return dict(self._commands)

    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands

    def lookup(self, name: str) -> Type[Stage]:
        """
        Get the stage class for a command.

        Raises:
            CommandNotFoundError: If the command is not built-in
        """
        try:
            return self._commands[name]
        except KeyError:
            raise CommandNotFoundError(name) from None


class PipelineBuilder:
    """
    Builds pipelines from stage specifications.

    Building is all or nothing: if any stage fails to construct, the
    error propagates and no pipeline is returned.

    Example:
        >>> builder = PipelineBuilder()
        >>> pipeline = builder.build(CommandParser().parse("ls | sort"))
    """

    def __init__(
        self,
        commands: Optional[BuiltinCommands] = None,
        config: Optional[Config] = None
    ):
        self._commands = commands or BuiltinCommands()
        self._config = config or get_config()
        self._logger = get_logger('builder')

    @property
    def commands(self) -> BuiltinCommands:
        return self._commands

    def build(self, specs: List[StageSpec]) -> Pipeline:
        """
        Build a pipeline.

        Args:
            specs: Stage specifications in pipeline order; empty ones are
                skipped

        Returns:
            The built pipeline

        Raises:
            ShellException: If a command is unknown or a stage rejects
                its arguments
        """
        stages: List[Stage] = [Empty()]

        for spec in specs:
            if spec.is_empty:
                continue

            try:
                stage_class = self._commands.lookup(spec.command)
                stage = stage_class.create(spec.args, stages[-1], self._config)
            except ShellException as e:
                self._logger.warning(
                    "Pipeline construction failed",
                    context={'command': spec.command, 'error': e.message}
                )
                raise

            self._logger.debug(
                "Stage constructed",
                context={'command': spec.command, 'args': spec.args}
            )
            stages.append(stage)

        return Pipeline(stages)
