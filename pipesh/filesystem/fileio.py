"""
Filesystem Access Module

The host filesystem primitives the built-in commands delegate to, and
the narrow API over the process-wide working directory. Only ``cd``
changes the working directory; the prompt reads it.

Author: pipesh developers
Version: 1.0.0
"""

import os
from typing import List, Optional


def read_lines(path: str) -> List[str]:
    """
    Read a text file as a list of lines without line terminators.

    Args:
        path: File path, relative to the current working directory

    Returns:
        Lines of the file in order

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return [line.rstrip('\n') for line in f]


def list_dir(path: Optional[str] = None) -> List[str]:
    """
    List the entry names of a directory, sorted lexicographically.

    Args:
        path: Directory path (current directory if None)

    Raises:
        OSError: If the directory cannot be read
    """
    return sorted(os.listdir(path if path is not None else '.'))


def get_cwd() -> str:
    """Get the process working directory."""
    return os.getcwd()


def set_cwd(path: str) -> str:
    """
    Change the process working directory.

    Args:
        path: Target directory

    Returns:
        The new working directory as an absolute path

    Raises:
        OSError: If the directory does not exist or is not accessible
    """
    os.chdir(path)
    return os.getcwd()
