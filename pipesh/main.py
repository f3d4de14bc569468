#!/usr/bin/env python3
"""
pipesh - main entry point

Startup sequence:
1. Parse command-line options
2. Load configuration
3. Initialize logging
4. Run one command line (-c) or the interactive shell

Author: pipesh developers
Version: 1.0.0
"""

import argparse
import sys
from typing import List, Optional

from pipesh.core.config_loader import ConfigLoader
from pipesh.exceptions import ConfigException
from pipesh.logger import Logger, LogLevel
from pipesh.shell.shell import Shell


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='pipesh',
        description='In-process command interpreter for Unix-style pipelines.'
    )
    parser.add_argument('--config', metavar='PATH', help='JSON configuration file')
    parser.add_argument('-c', dest='command', metavar='COMMANDLINE',
                        help='run one command line and exit')
    parser.add_argument('--debug', action='store_true', help='log at DEBUG level')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for pipesh.

    Returns:
        Process exit status
    """
    args = _parse_args(argv)

    loader = ConfigLoader()
    if args.config:
        try:
            loader.load(args.config)
        except ConfigException as e:
            print(f"pipesh: {e}", file=sys.stderr)
            return 2

    config = loader.config
    level = LogLevel.DEBUG if args.debug else LogLevel.from_name(config.logging.level)
    Logger.initialize(
        level=level,
        log_file=config.logging.log_file,
        console_output=config.logging.console_output
    )

    shell = Shell(config=config)

    try:
        if args.command is not None:
            return shell.execute_line(args.command)

        try:
            shell.run()
        except KeyboardInterrupt:
            print("\n\nInterrupted")
        return 0
    finally:
        Logger.shutdown()


if __name__ == '__main__':
    sys.exit(main())
