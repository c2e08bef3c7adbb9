from __future__ import annotations

import uuid
from dataclasses import dataclass

from ..core.enums import ClassType


@dataclass(frozen=True)
class Employee:
    """Domain entity: directory entry used to badge ledger rows by name."""

    id: str
    name: str
    class_type: ClassType
    phone: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "classType": self.class_type.value,
            "phone": self.phone,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        try:
            class_type = ClassType(data.get("classType"))
        except ValueError:
            class_type = ClassType.A
        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            name=str(data.get("name") or ""),
            class_type=class_type,
            phone=str(data.get("phone") or ""),
        )
