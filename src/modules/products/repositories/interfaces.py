"""Product repository interface.

Extends ``IRepository[Product]`` with the batch operations used by
order placement: a multi-id look-up and an absolute stock update.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None`` if absent."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Product:
        """Create a product from ``name``, ``price`` and ``quantity``."""

    @abstractmethod
    def find_all_by_id(self, products: List[Dict[str, Any]]) -> List[Product]:
        """Return the products whose ``id`` appears in ``products``.

        ``products`` is a list of ``{"id": ..., "quantity": ...}`` dicts;
        only ``id`` is used.  Ids without a match are silently skipped and
        the result order is not guaranteed to follow the input.
        """

    @abstractmethod
    def update_quantity(self, products: List[Dict[str, Any]]) -> None:
        """Set each product's stock to the absolute ``quantity`` given."""
