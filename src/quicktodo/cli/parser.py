"""Command line parsing for the interactive prompt.

Input lines use shell-style quoting::

    add "Buy milk" "Two litres, semi-skimmed"
    complete "Buy milk"
"""

import shlex
from dataclasses import dataclass, field


class CommandParseError(ValueError):
    """The input line could not be tokenized."""

    pass


@dataclass
class Command:
    """A parsed input line: lowercase verb plus positional arguments."""

    verb: str
    args: list[str] = field(default_factory=list)


def parse_command(line: str) -> Command | None:
    """Split a line into a verb and its arguments.

    Returns:
        The parsed command, or None for a blank line.

    Raises:
        CommandParseError: On unbalanced quotes or a trailing escape.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise CommandParseError(f"Could not parse input: {e}") from e

    if not tokens:
        return None
    return Command(verb=tokens[0].lower(), args=tokens[1:])
