from __future__ import annotations

import uuid
from dataclasses import dataclass

from ..common.validators import coerce_amount


@dataclass(frozen=True)
class Product:
    """Domain entity: a product type and its rate per meter unit."""

    id: str
    name: str
    rate: float

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "rate": self.rate}

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            name=str(data.get("name") or ""),
            rate=coerce_amount(data.get("rate")),
        )
