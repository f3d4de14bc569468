"""
pipesh - An in-process command interpreter

Evaluates Unix-style pipelines such as ``ls | grep a | sort | uniq``
without spawning processes: each command is a pipeline stage, and the
pipeline is driven by pulling items from its last stage.
"""

__version__ = "1.0.0"
__author__ = "pipesh developers"

from .shell.shell import Shell, create_shell
from .shell.builtins import PipelineBuilder
from .shell.pipeline import Pipeline, PipelineRunner

__all__ = [
    'Shell',
    'create_shell',
    'PipelineBuilder',
    'Pipeline',
    'PipelineRunner',
]
