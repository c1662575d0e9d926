# src/optodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console connector on an
asyncio loop until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import level_from_name, setup_logging
from ..render.board_view import use_color

logger = logging.getLogger(__name__)


async def _run(settings) -> None:
    # Built on the loop so notice timers bind to it.
    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    await run_console_loop(state, color=use_color(settings.color, sys.stdout))


def main() -> None:
    settings = get_settings()

    console_level = level_from_name(getattr(settings, "log_level", None), default=logging.WARNING)

    log_dir = getattr(settings, "data_dir", ".local/optodo")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger.info("Starting %s...", getattr(settings, "app_name", "optodo"))

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting.")
        print()
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
