"""
pipesh Shell Module

The interactive read-eval loop.

Author: pipesh developers
Version: 1.0.0
"""

import sys
from typing import Callable, Optional

from .parser import CommandParser
from .builtins import BuiltinCommands, PipelineBuilder
from .pipeline import PipelineRunner
from pipesh.core.config_loader import Config, get_config
from pipesh.exceptions import ShellException, CommandNotFoundError
from pipesh.filesystem import get_cwd
from pipesh.logger import get_logger


EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 127


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


class Shell:
    """
    pipesh Interactive Shell.

    Each input line is parsed, built into a pipeline and run. Faults are
    reported and the loop goes on; ``exit`` (or end of input) ends it.

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        output: Callable[[str], None] = print,
        error_output: Callable[[str], None] = _print_error,
        input_func: Callable[[str], str] = input,
        config: Optional[Config] = None
    ):
        self._config = config or get_config()
        self._logger = get_logger('shell')
        self._parser = CommandParser(history_size=self._config.shell.history_size)
        self._builder = PipelineBuilder(BuiltinCommands(), config=self._config)
        self._runner = PipelineRunner(output=output)
        self._output = output
        self._error_output = error_output
        self._input = input_func
        self._running = False
        self._exiting = False

    @property
    def cwd(self) -> str:
        return get_cwd()

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def builder(self) -> PipelineBuilder:
        return self._builder

    @property
    def exiting(self) -> bool:
        return self._exiting

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        self._running = True
        self._logger.info("Session started")

        while self._running and not self._exiting:
            try:
                prompt = self._get_prompt()

                try:
                    line = self._input(prompt)
                except EOFError:
                    self._output("")
                    break
                except KeyboardInterrupt:
                    self._output("^C")
                    continue

                self.execute_line(line)

            except Exception as e:
                self._logger.exception("Unexpected shell error", exc=e)
                self._error_output(f"shell: error: {e}")

        self._running = False
        self._logger.info("Session ended")

    def _get_prompt(self) -> str:
        """Generate the shell prompt."""
        prompt = self._config.shell.prompt
        if not self._config.shell.show_cwd:
            return prompt

        try:
            cwd = self.cwd
        except OSError:
            # The working directory was removed from under us.
            cwd = '?'
        return f"{cwd}\n{prompt}"

    def execute_line(self, line: str) -> int:
        """
        Execute a command line.

        Args:
            line: Command line string

        Returns:
            Exit code
        """
        specs = self._parser.parse(line)

        # Construction faults are logged by the builder.
        try:
            pipeline = self._builder.build(specs)
        except CommandNotFoundError as e:
            self._error_output(e.message)
            return EXIT_NOT_FOUND
        except ShellException as e:
            self._error_output(e.message)
            return EXIT_FAILURE

        try:
            result = self._runner.run(pipeline)
        except ShellException as e:
            self._logger.error("Pipeline fault", context={'line': line, 'error': e.message})
            self._error_output(e.message)
            return EXIT_FAILURE

        if result.is_error:
            self._logger.error("Pipeline fault", context={'line': line, 'error': result.text})
            self._error_output(result.text)
            return EXIT_FAILURE

        if result.is_exit:
            self.request_exit()

        return EXIT_SUCCESS

    def request_exit(self) -> None:
        """Request the shell to exit."""
        self._exiting = True

    def stop(self) -> None:
        """Stop the shell."""
        self._running = False

    def run_script(self, script: str) -> int:
        """
        Run a script (multiple command lines).

        Execution stops after a line that runs ``exit``.

        Args:
            script: Script content

        Returns:
            Last exit code
        """
        exit_code = EXIT_SUCCESS

        for line in script.splitlines():
            exit_code = self.execute_line(line)
            if self._exiting:
                break

        return exit_code


def create_shell(**kwargs) -> Shell:
    """Factory function to create a shell."""
    return Shell(**kwargs)
