"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``create`` is wrapped in ``transaction.atomic()`` so the Order aggregate
(Order + OrderItems) is persisted as one unit.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        ``data`` keys:
        - ``customer`` (required): the ordering ``Customer``
        - ``products`` (required): list of dicts with ``product_id``,
          ``quantity``, ``price``
        """
        order = Order.objects.create(customer=data["customer"])

        items = data["products"]
        for item_data in items:
            OrderItem.objects.create(
                order=order,
                product_id=item_data["product_id"],
                quantity=item_data["quantity"],
                price=item_data["price"],
            )

        log = logger.bind(order_id=str(order.id), item_count=len(items))
        log.info("order.persisted")

        return order

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations.

        Uses ``select_related`` for the customer FK and ``prefetch_related``
        for items, so reading ``order.items`` costs no extra query per item.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.select_related("customer")
                .prefetch_related("items")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None
