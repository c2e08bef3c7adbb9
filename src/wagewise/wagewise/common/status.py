"""Transient status message (toast) kept in the session.

Only one message exists at a time: setting a new one replaces the previous
one, and a message is dropped once its display window has passed.
Flask's ``flash`` is not used: it has no expiry and queues messages instead
of replacing them.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import MutableMapping, Optional

from ..core.constants import DEFAULT_STATUS_MESSAGE_SECONDS
from ..core.enums import MessageLevel

SESSION_KEY = "status_message"


@dataclass(frozen=True)
class StatusMessage:
    text: str
    level: MessageLevel
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def to_dict(self) -> dict:
        data = asdict(self)
        data["level"] = self.level.value
        data["expires_at"] = self.expires_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "StatusMessage":
        return cls(
            text=str(data["text"]),
            level=MessageLevel(data.get("level", MessageLevel.INFO.value)),
            expires_at=datetime.fromisoformat(data["expires_at"]),
        )


def set_status(
    store: MutableMapping,
    text: str,
    level: MessageLevel = MessageLevel.SUCCESS,
    *,
    seconds: int = DEFAULT_STATUS_MESSAGE_SECONDS,
    now: Optional[datetime] = None,
) -> StatusMessage:
    now = now or datetime.now()
    message = StatusMessage(text=text, level=level, expires_at=now + timedelta(seconds=int(seconds)))
    store[SESSION_KEY] = message.to_dict()
    return message


def current_status(store: MutableMapping, *, now: Optional[datetime] = None) -> Optional[StatusMessage]:
    raw = store.get(SESSION_KEY)
    if not raw:
        return None

    try:
        message = StatusMessage.from_dict(raw)
    except (KeyError, TypeError, ValueError):
        store.pop(SESSION_KEY, None)
        return None

    if message.is_expired(now or datetime.now()):
        store.pop(SESSION_KEY, None)
        return None
    return message
