"""Interactive command-line interface."""

from .parser import Command, CommandParseError, parse_command
from .repl import TodoShell

__all__ = [
    "Command",
    "CommandParseError",
    "TodoShell",
    "parse_command",
]
