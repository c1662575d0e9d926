# src/optodo/connectors/console_connector.py

"""
Interactive console front-end (the presentation layer).

Runs on the asyncio loop: stdin is read by a daemon thread and handed over
through a queue, so notice timers fire on the loop while the user is typing
and a blocked read never holds up shutdown.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from collections.abc import Awaitable, Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..notifications.notice_models import Notice
from ..render.board_view import render_board
from ..tasks.task_api import submit_new_task

logger = logging.getLogger(__name__)

LineReader = Callable[[], Awaitable[str | None]]
Writer = Callable[[str], None]

PROMPT = ": "
EXIT_COMMANDS = ("/exit", "/quit")


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print("\033[H\033[2J", end="", flush=True)


def _stdout_write(text: str) -> None:
    print(text, end="", flush=True)


class _StdinReader:
    """Daemon thread feeding stdin lines into an asyncio queue (None on EOF)."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._queue: asyncio.Queue[str | None] = asyncio.Queue()
        self._thread = threading.Thread(target=self._run, name="optodo-stdin", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        while True:
            try:
                raw = sys.stdin.readline()
            except Exception:
                logger.debug("stdin read failed.", exc_info=True)
                raw = ""
            line = raw.rstrip("\r\n") if raw else None
            self._loop.call_soon_threadsafe(self._queue.put_nowait, line)
            if line is None:
                return

    async def read_line(self) -> str | None:
        return await self._queue.get()


class ConsoleSession:
    """
    One REPL session: read a line, route it, redraw.

    Routing:
    - /exit, /quit       -> leave
    - /command ...       -> CommandRegistry
    - plain text         -> draft text while editing, otherwise a new task
    """

    def __init__(
        self,
        state: AppState,
        *,
        read_line: LineReader,
        write: Writer = _stdout_write,
        color: bool = False,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.state = state
        self._read_line = read_line
        self._write = write
        self._color = color
        self._clear = clear
        self._waiting = False
        state.notices.on_change(self._on_notice_change)

    def redraw(self, reply: str | None = None) -> None:
        if self._clear is not None:
            self._clear()
        self._write(render_board(self.state, color=self._color) + "\n")
        if reply:
            self._write(f"\n{reply}\n")

    def _on_notice_change(self, notice: Notice | None) -> None:
        # Only expiry happens while idle at the prompt; everything else redraws anyway.
        if notice is None and self._waiting:
            self.redraw()
            self._write(PROMPT)

    def handle_line(self, line: str) -> str | None:
        """Route one input line. Returns the reply to print under the board."""
        text = line.strip()
        if not text:
            return None

        if command_registry.is_command(text):
            try:
                return command_registry.handle(self.state, text)
            except Exception:
                logger.exception("Command handler crashed.")
                return "Internal error while handling a command."

        if self.state.edit.active:
            self.state.edit.update_draft(text)
            return None

        submit_new_task(self.state, text)
        return None

    async def run(self) -> None:
        logger.info("Console connector started.")
        self.redraw("Type a task and press Enter to add it. Use /help for commands.")

        while True:
            self._write(PROMPT)
            self._waiting = True
            try:
                line = await self._read_line()
            finally:
                self._waiting = False

            if line is None:
                logger.info("Console EOF received, exiting.")
                self._write("\n")
                break

            if line.strip().lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            reply = self.handle_line(line)
            self.redraw(reply)

        logger.info("Console connector finished.")


async def run_console_loop(state: AppState, *, color: bool = False) -> None:
    reader = _StdinReader(asyncio.get_running_loop())
    reader.start()
    session = ConsoleSession(
        state,
        read_line=reader.read_line,
        color=color,
        clear=_clear_screen,
    )
    await session.run()
