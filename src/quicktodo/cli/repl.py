"""Interactive command loop."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..exceptions import TodoError
from ..repositories import RepositoryProtocol
from .output import error, info, success, task_list
from .parser import Command, CommandParseError, parse_command

logger = logging.getLogger(__name__)

USAGE = {
    "add": 'add "<title>" "<content>"',
    "list": "list",
    "complete": 'complete "<title>"',
    "remove": 'remove "<title>"',
    "help": "help",
    "quit": "quit",
}

# Verb aliases map onto a canonical verb
ALIASES = {
    "delete": "remove",
    "rm": "remove",
    "done": "complete",
    "ls": "list",
    "exit": "quit",
}


class TodoShell:
    """Reads command lines and forwards them to a repository.

    Errors from parsing or from the backend are printed; the loop continues.
    """

    def __init__(self, repository: RepositoryProtocol) -> None:
        self.repository = repository
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "add": self._add,
            "list": self._list,
            "complete": self._complete,
            "remove": self._remove,
            "help": self._help,
        }

    def run(self, lines: Iterable[str]) -> None:
        """Process lines until input ends or the user quits."""
        for line in lines:
            if not self.handle_line(line):
                break

    def handle_line(self, line: str) -> bool:
        """Execute one input line.

        Returns:
            False when the loop should stop, True otherwise.
        """
        try:
            command = parse_command(line)
        except CommandParseError as e:
            error(str(e))
            return True

        if command is None:
            return True

        verb = ALIASES.get(command.verb, command.verb)
        if verb == "quit":
            return False

        handler = self._handlers.get(verb)
        if handler is None:
            error(f"Unknown command: {command.verb}")
            info("Type 'help' for a list of commands")
            return True

        self._dispatch(handler, Command(verb=verb, args=command.args))
        return True

    def _dispatch(self, handler: Callable[[list[str]], None], command: Command) -> None:
        logger.debug("Dispatching %s %s", command.verb, command.args)
        try:
            handler(command.args)
        except TodoError as e:
            logger.info("%s failed: %s", command.verb, e)
            error(str(e))

    def _usage(self, verb: str) -> None:
        error(f"Usage: {USAGE[verb]}")

    # --- Commands ---

    def _add(self, args: list[str]) -> None:
        if len(args) < 2:
            self._usage("add")
            return
        title, content = args[0], " ".join(args[1:])
        self.repository.add(title, content)
        success("Added task.")

    def _list(self, args: list[str]) -> None:
        task_list(self.repository.list())

    def _complete(self, args: list[str]) -> None:
        if len(args) != 1:
            self._usage("complete")
            return
        self.repository.complete(args[0])
        success("Completed task.")

    def _remove(self, args: list[str]) -> None:
        if len(args) != 1:
            self._usage("remove")
            return
        self.repository.remove(args[0])
        success("Removed task.")

    def _help(self, args: list[str]) -> None:
        info("Commands:")
        for usage in USAGE.values():
            info(usage)
