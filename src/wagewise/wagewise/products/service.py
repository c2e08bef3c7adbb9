from __future__ import annotations

import uuid
from typing import Any, Callable, Optional, Sequence

from ..common.validators import require_max_length, require_non_empty, require_non_negative_number
from ..core.constants import PRODUCT_NAME_MAX_LENGTH
from ..core.exceptions import DuplicateNameError, NotFoundError
from .model import Product
from .repository import ProductRepository


class ProductService:
    """Use case: maintain the product catalog (add / delete, no update)."""

    def __init__(self, products: ProductRepository, *, id_factory: Optional[Callable[[], str]] = None):
        self._products = products
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_products(self) -> Sequence[Product]:
        return self._products.list_all()

    def add_product(self, *, name: str, rate: Any) -> Product:
        name = require_non_empty(name, "Product name")
        require_max_length(name, "Product name", PRODUCT_NAME_MAX_LENGTH)
        rate_value = require_non_negative_number(rate, "Rate")

        lowered = name.lower()
        if any(p.name.lower() == lowered for p in self._products.list_all()):
            raise DuplicateNameError("Product name already exists.")

        product = Product(id=self._new_id(), name=name, rate=rate_value)
        self._products.add(product)
        return product

    def delete_product(self, product_id: str) -> None:
        if not self._products.delete_by_id(product_id):
            raise NotFoundError("Product not found.")
