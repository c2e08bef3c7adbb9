from __future__ import annotations

from ...common.validators import coerce_amount
from ...products.model import Product
from ..model import ProductLine
from .base import WageCalculator


class MeterRateCalculator(WageCalculator):
    """Standard rule: meter x rate, a meter that is not a number counts as 0."""

    def line_for(self, product: Product, meter: str | float | None) -> ProductLine:
        text = "" if meter is None else str(meter)
        meter_value = coerce_amount(text) if text.strip() else 0.0
        return ProductLine(
            product=product,
            meter=text.strip() or "0",
            meter_value=meter_value,
            row_total=meter_value * product.rate,
        )
