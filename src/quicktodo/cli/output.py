"""Terminal output for the TODO prompt.

Markers are colored only when stdout is a terminal, so piped output and
captured test output stay plain.
"""

import sys
from collections.abc import Iterable

from ..models import Task

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"

CHECK = "✓"
BULLET = "•"
CROSS = "✗"
BANG = "!"

LIST_HEADER = "--- TODO List ---"
LIST_FOOTER = "-----------------"


def _colorize(text: str, color: str) -> str:
    if hasattr(sys.stdout, "isatty") and sys.stdout.isatty():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Report a completed command."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def info(message: str) -> None:
    print(f"{_colorize(BULLET, YELLOW)} {message}")


def warning(message: str) -> None:
    """Report a problem that did not stop the command, e.g. a bad config file."""
    print(f"{_colorize(BANG, YELLOW)} {message}")


def error(message: str) -> None:
    """Report a failed command."""
    print(f"{_colorize(CROSS, RED)} {message}")


def task_list(tasks: Iterable[Task]) -> None:
    """Print the list header, one summary line per task, and the footer.

    Completed lines are dimmed to green on a terminal.
    """
    print(LIST_HEADER)
    for task in tasks:
        line = task.summary()
        print(_colorize(line, GREEN) if task.completed else line)
    print(LIST_FOOTER)
