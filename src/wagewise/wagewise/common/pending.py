"""Two-state confirmation flow for destructive actions.

A view is either idle (no pending action) or armed with exactly one
PendingAction. Confirming applies the armed action; cancelling goes back to
idle without touching any data.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import MutableMapping, Optional

from ..core.enums import PendingKind

SESSION_KEY = "pending_action"


@dataclass(frozen=True)
class PendingAction:
    kind: PendingKind
    target_id: Optional[str] = None

    def matches(self, kind: PendingKind, target_id: Optional[str] = None) -> bool:
        return self.kind == kind and self.target_id == target_id

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "target_id": self.target_id}

    @classmethod
    def from_dict(cls, data: dict) -> "PendingAction":
        return cls(kind=PendingKind(data["kind"]), target_id=data.get("target_id"))


def arm(store: MutableMapping, kind: PendingKind, target_id: Optional[str] = None) -> PendingAction:
    action = PendingAction(kind=kind, target_id=target_id)
    store[SESSION_KEY] = action.to_dict()
    return action


def get_pending(store: MutableMapping) -> Optional[PendingAction]:
    raw = store.get(SESSION_KEY)
    if not raw:
        return None
    try:
        return PendingAction.from_dict(raw)
    except (KeyError, TypeError, ValueError):
        store.pop(SESSION_KEY, None)
        return None


def disarm(store: MutableMapping) -> None:
    store.pop(SESSION_KEY, None)


def take_if_armed(store: MutableMapping, kind: PendingKind, target_id: Optional[str] = None) -> bool:
    """Consume the pending action if it is the one being confirmed."""
    action = get_pending(store)
    disarm(store)
    return action is not None and action.matches(kind, target_id)
