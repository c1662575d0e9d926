# src/optodo/notifications/notice_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class NoticeKind(StrEnum):
    """
    Notice kind, used only to pick presentation styling.

    NEUTRAL is never emitted by the task store; it is what unrecognized
    kind strings collapse to.
    """

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    COMPLETE = "complete"
    NEUTRAL = "neutral"

    @classmethod
    def from_raw(cls, raw: str | None) -> NoticeKind:
        if not raw:
            return cls.NEUTRAL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.NEUTRAL


# Fixed wording per store mutation.
MSG_CREATED = "Logged. Try not to forget it this time."
MSG_COMPLETED = "Completed. My faith in you rises slightly."
MSG_DELETED = "Gone. As if it never happened."
MSG_UPDATED = "Polished. Much better."


@dataclass(slots=True, frozen=True)
class Notice:
    """
    One visible notice.

    `seq` identifies this particular notice; the auto-clear callback for it
    carries the same number, so a late callback cannot clear a newer notice.
    `kind` keeps the raw string the caller passed; use `style` for rendering.
    """

    seq: int
    text: str
    kind: str

    @property
    def style(self) -> NoticeKind:
        return NoticeKind.from_raw(self.kind)
