"""
pipesh Filesystem Module

Host filesystem primitives used by the built-in commands:
- Reading file lines
- Listing directories
- The process working directory
"""

from .fileio import read_lines, list_dir, get_cwd, set_cwd

__all__ = [
    'read_lines',
    'list_dir',
    'get_cwd',
    'set_cwd',
]
