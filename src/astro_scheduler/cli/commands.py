# src/astro_scheduler/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import SchedulerError
from ..tasks.task_factory import format_time
from .bootstrap import run_demo

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Scheduler errors (parse/conflict/not found) become the reply text.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)

            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except SchedulerError as err:
            logger.debug("/%s rejected: %s", name, err)
            return f"Error: {err}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <start> <end> <priority> <description...>
    e.g. /add 07:00 08:00 high Morning Exercise
    """
    if len(args) < 4:
        return "Usage: /add <start HH:MM> <end HH:MM> <high|medium|low> <description>"

    start, end, priority = args[0], args[1], args[2]
    description = " ".join(args[3:])
    task = state.scheduler.add_task(description, start, end, priority)
    return (
        f"Added: {task.description} "
        f"{format_time(task.start_time)}-{format_time(task.end_time)} [{task.priority.value}]"
    )


def cmd_remove(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /remove <description>"

    task = state.scheduler.remove_task(" ".join(args))
    return f"Removed: {task.description}"


def cmd_reschedule(state: AppState, args: list[str]) -> str:
    """
    /reschedule <start> <end> <description...>
    """
    if len(args) < 3:
        return "Usage: /reschedule <start HH:MM> <end HH:MM> <description>"

    task = state.scheduler.reschedule_task(" ".join(args[2:]), args[0], args[1])
    return (
        f"Rescheduled: {task.description} "
        f"{format_time(task.start_time)}-{format_time(task.end_time)}"
    )


def cmd_undo(state: AppState, args: list[str]) -> str:
    command = state.scheduler.undo()
    if command is None:
        return "Nothing to undo."
    return f"Undone: {command!r}"


def cmd_list(state: AppState, args: list[str]) -> str:
    return state.scheduler.list_schedule().render()


def cmd_demo(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    lines: list[str] = []
    run_demo(state, emit=emit or lines.append)
    if lines:
        return "\n".join(lines) + "\nDemo finished."
    return "Demo finished."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add 07:00 08:00 high Morning Exercise.",
)
registry.register(
    "remove",
    cmd_remove,
    help_text="Remove a task by description: /remove Morning Exercise.",
    aliases=["rm"],
)
registry.register(
    "reschedule",
    cmd_reschedule,
    help_text="Move a task: /reschedule 10:00 11:00 Team Meeting.",
    aliases=["mv"],
)
registry.register("undo", cmd_undo, help_text="Undo the last add/remove/reschedule.", aliases=["u"])
registry.register("list", cmd_list, help_text="Show the schedule.", aliases=["ls"])
registry.register("demo", cmd_demo, help_text="Replay the sample astronaut day.")
