from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...products.model import Product
from ..model import ProductLine


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for wages)."""

    @abstractmethod
    def line_for(self, product: Product, meter: str | float | None) -> ProductLine:
        raise NotImplementedError

    def grand_total(self, lines: Sequence[ProductLine]) -> float:
        return sum((line.row_total for line in lines), 0.0)
