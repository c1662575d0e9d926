# src/optodo/render/board_view.py

"""Plain-text rendering of the task board.

Decisions:
- Notice styling is picked by kind; unrecognized kinds render neutral.
- Color is optional: "auto" enables it only on a TTY and honors NO_COLOR.
- Rendering is a pure function of AppState; the connector decides when to redraw.
"""

from __future__ import annotations

import os
from typing import TextIO

from ..core.state import AppState
from ..notifications.notice_models import Notice, NoticeKind

FOOTER = "Built to keep the chaos in check."
EMPTY_TEXT = "No tasks yet. Time to stay organized."

RESET = "\033[0m"
BOLD = "1"
DIM_STRIKE = "2;9"

NOTICE_STYLES: dict[NoticeKind, tuple[str, str]] = {
    # kind -> (badge, SGR color)
    NoticeKind.CREATE: ("+", "34"),
    NoticeKind.UPDATE: ("~", "33"),
    NoticeKind.DELETE: ("-", "31"),
    NoticeKind.COMPLETE: ("✓", "32"),
    NoticeKind.NEUTRAL: ("*", ""),
}


def use_color(mode: str, stream: TextIO) -> bool:
    if mode == "always":
        return True
    if mode == "never" or os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except Exception:
        return False


def _paint(text: str, sgr: str, enabled: bool) -> str:
    if not enabled or not sgr:
        return text
    return f"\033[{sgr}m{text}{RESET}"


def render_notice(notice: Notice, *, color: bool = False) -> str:
    badge, sgr = NOTICE_STYLES[notice.style]
    return _paint(f"[{badge}] {notice.text}", sgr, color)


def render_board(state: AppState, *, color: bool = False) -> str:
    store = state.store
    edit = state.edit
    title = str(getattr(state.settings, "app_name", "Operational To-Dos"))

    lines: list[str] = [
        _paint(title, BOLD, color),
        f"{store.completed_count()} of {store.total()} completed",
        "",
    ]

    notice = state.notices.current
    if notice is not None:
        lines.append(render_notice(notice, color=color))
        lines.append("")

    tasks = store.tasks()
    if not tasks:
        lines.append(f"  {EMPTY_TEXT}")
    for pos, task in enumerate(tasks, start=1):
        box = "[x]" if task.completed else "[ ]"
        if edit.is_editing(task.id):
            lines.append(f"  {pos}. {box} > {edit.draft_text}_   (/save, /revert)")
            continue
        text = task.title if task.title else "<untitled>"
        if task.completed:
            text = _paint(text, DIM_STRIKE, color)
        lines.append(f"  {pos}. {box} {text}")

    lines.append("")
    lines.append(FOOTER)
    return "\n".join(lines)
