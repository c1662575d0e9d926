# src/optodo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import EmptyTitle, TaskNotFound
from ..tasks.task_api import begin_edit, commit_edit, remove_task, revert_edit, task_id_at
from ..tasks.task_models import TaskId

# Handlers return a reply line, or None when the redrawn board is feedback enough.
CommandHandler = Callable[[AppState, list[str]], str | None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /done, ...)."""

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

    def is_command(self, line: str) -> bool:
        return line.startswith("/")

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".

        Returns the reply (possibly None) for commands. Non-command lines must
        be filtered with is_command() first; they are answered with a hint.
        """
        if not self.is_command(line):
            return "Not a command. Use /help to list available commands."

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        logger.debug("Command /%s args=%s", name, args)

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (also /quit).")
        lines.append("  (plain text adds a task, or replaces the draft while editing)")
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve_position(
    state: AppState, args: list[str], usage: str
) -> tuple[TaskId | None, str | None]:
    """Map args[0] (a 1-based task number) to (task_id, None) or (None, reply)."""
    if len(args) != 1:
        return None, usage
    raw = args[0].rstrip(".")
    if not raw.isdigit():
        return None, "Invalid task number."
    task_id = task_id_at(state, int(raw))
    if task_id is None:
        return None, f"No task #{raw}."
    return task_id, None


def cmd_help(state: AppState, args: list[str]) -> str | None:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str | None:
    return None


def cmd_toggle(state: AppState, args: list[str]) -> str | None:
    """
    /done N  -> flip completion of task N
    """
    task_id, reply = _resolve_position(state, args, "Usage: /done <number>")
    if task_id is None:
        return reply
    state.store.toggle(task_id)
    return None


def cmd_remove(state: AppState, args: list[str]) -> str | None:
    task_id, reply = _resolve_position(state, args, "Usage: /rm <number>")
    if task_id is None:
        return reply
    remove_task(state, task_id)
    return None


def cmd_edit(state: AppState, args: list[str]) -> str | None:
    """
    /edit N  -> start renaming task N; type the new title, then /save
    """
    task_id, reply = _resolve_position(state, args, "Usage: /edit <number>")
    if task_id is None:
        return reply
    begin_edit(state, task_id)
    pos = state.store.position_of(task_id)
    return f"Editing #{pos}. Type the new title, then /save (or /revert to start over)."


def cmd_save(state: AppState, args: list[str]) -> str | None:
    try:
        committed = commit_edit(state)
    except EmptyTitle:
        return "Title required."
    except TaskNotFound as e:
        return str(e)
    if committed is None:
        return "Nothing is being edited. Use /edit <number> first."
    return None


def cmd_revert(state: AppState, args: list[str]) -> str | None:
    try:
        reverted = revert_edit(state)
    except TaskNotFound as e:
        return str(e)
    if not reverted:
        return "Nothing is being edited. Use /edit <number> first."
    return None


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"])
registry.register(
    "done", cmd_toggle, help_text="Toggle completion: /done <number>.", aliases=["toggle", "x"]
)
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <number>.", aliases=["del"])
registry.register("edit", cmd_edit, help_text="Rename a task: /edit <number>.")
registry.register("save", cmd_save, help_text="Save the title being edited.")
registry.register("revert", cmd_revert, help_text="Reset the draft to the saved title.")
