"""
pipesh Shell Module

Provides the command interpreter:
- Command parsing
- Pipeline stages for the built-in commands
- Pipeline building and execution
- The interactive read-eval loop
"""

from .items import Item, ItemKind
from .parser import CommandParser, StageSpec, Token, TokenType
from .stages import Stage, Empty, Cat, Ls, Grep, Sort, Uniq, Cd, Exit
from .pipeline import Pipeline, PipelineRunner
from .builtins import BuiltinCommands, PipelineBuilder
from .shell import Shell, create_shell

__all__ = [
    'Item',
    'ItemKind',
    'CommandParser',
    'StageSpec',
    'Token',
    'TokenType',
    'Stage',
    'Empty',
    'Cat',
    'Ls',
    'Grep',
    'Sort',
    'Uniq',
    'Cd',
    'Exit',
    'Pipeline',
    'PipelineRunner',
    'BuiltinCommands',
    'PipelineBuilder',
    'Shell',
    'create_shell',
]
