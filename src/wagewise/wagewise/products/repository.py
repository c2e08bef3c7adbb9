from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Product


class ProductRepository(Protocol):
    """Repository interface for the product catalog.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Product]:
        raise NotImplementedError

    def get_by_id(self, product_id: str) -> Optional[Product]:
        raise NotImplementedError

    def add(self, product: Product) -> None:
        raise NotImplementedError

    def delete_by_id(self, product_id: str) -> bool:
        raise NotImplementedError
