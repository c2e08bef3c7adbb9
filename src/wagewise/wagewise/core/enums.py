from __future__ import annotations

from enum import Enum


class ClassType(str, Enum):
    """Employee classification tag shown as a badge on ledger rows."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


class AdjustableField(str, Enum):
    """Ledger amounts that can be edited directly on a row."""

    ADVANCE = "advanceAmount"
    REPAY = "repayAmount"


class PendingKind(str, Enum):
    """Destructive actions that wait for explicit confirmation."""

    DELETE_PRODUCT = "DELETE_PRODUCT"
    DELETE_LEDGER_ENTRY = "DELETE_LEDGER_ENTRY"
    CLEAR_LEDGER = "CLEAR_LEDGER"
    DELETE_EMPLOYEE = "DELETE_EMPLOYEE"


class MessageLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class StorageBackend(str, Enum):
    JSON = "json"
    MYSQL = "mysql"
    MEMORY = "memory"
