"""Order repository interface.

Extends ``IRepository[Order]``: an order is created together with its
items and read back by id.  The Service Layer depends exclusively on
this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem children; creation must
    persist both as one unit.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items.

        ``data`` must include ``customer`` (the customer entity) and
        ``products``: a list of dicts with ``product_id``, ``quantity``
        and ``price``.
        """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its items, or ``None`` if absent."""
