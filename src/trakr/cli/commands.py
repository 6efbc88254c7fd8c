# src/trakr/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import UsageError
from ..tasks.task_store import TaskStore
from .formatting import render_active, render_done

CommandHandler = Callable[[TaskStore, list[str]], str | None]

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    example: str


class CommandRegistry:
    """Maps `trakr <command> [args]` to handlers and builds the usage text."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        example: str = "",
    ) -> None:
        self._commands[name] = Command(name, handler, help_text, example)

    def resolve(self, argv: list[str]) -> tuple[Command, list[str]]:
        """
        Validate argv (without the program name) and pick the command.

        Raises UsageError for a missing or unsupported command. This runs
        before the store is loaded.
        """
        if not argv:
            raise UsageError("not enough arguments")

        name = argv[0].strip()
        if not name:
            raise UsageError("invalid arguments")

        cmd = self._commands.get(name)
        if cmd is None:
            raise UsageError("unsupported command")
        return cmd, argv[1:]

    def handle(self, store: TaskStore, argv: list[str]) -> str | None:
        """Run one command against a loaded store. Returns text to print, if any."""
        cmd, args = self.resolve(argv)
        logger.debug("Dispatching %s args=%r", cmd.name, args)
        return cmd.handler(store, args)

    def build_help(self) -> str:
        width = max((len(n) for n in self._commands), default=0)
        lines = ["USAGE: trakr <command> [options]", "", "COMMANDS:"]
        for name, cmd in self._commands.items():
            line = f"\t{name.ljust(width)} \t{cmd.help_text}"
            if cmd.example:
                line += f" ({cmd.example})"
            lines.append(line)
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int | None:
    """
    Leading-integer parse: "3" -> 3, " 3abc" -> 3, "abc" -> None.

    None is passed on to the store, where it fails the bounds check.
    """
    m = _LEADING_INT.match(raw.strip())
    return int(m.group(0)) if m else None


def cmd_help(store: TaskStore, args: list[str]) -> str:
    return registry.build_help()


def cmd_start(store: TaskStore, args: list[str]) -> None:
    if not args:
        raise UsageError("missing info for start")
    store.start(args[0].strip())


def cmd_end(store: TaskStore, args: list[str]) -> None:
    if not args:
        raise UsageError("missing id for end")
    store.end(parse_task_id(args[0]))


def cmd_ls(store: TaskStore, args: list[str]) -> str:
    return render_active(store.get_active()) + "\n\n" + render_done(store.get_done_today())


registry.register("start", cmd_start, "Start tracking a task", 'trakr start "working"')
registry.register("end", cmd_end, "End tracking a task", "trakr end 0")
registry.register("ls", cmd_ls, "List active tasks", "trakr ls")
registry.register("help", cmd_help, "Print this help text")
