"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
or an empty list instead of raising; the Service Layer decides how to
translate a missing entity into a business error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Product:
        product = Product.objects.create(
            name=data["name"],
            price=data["price"],
            quantity=data.get("quantity", 0),
        )
        logger.info("product.created", product_id=str(product.id))
        return product

    def find_all_by_id(self, products: List[Dict[str, Any]]) -> List[Product]:
        """Fetch every requested product in a single ``IN`` query.

        A malformed id anywhere in the batch yields an empty result, the
        same as a batch where nothing matched.
        """
        ids = [entry["id"] for entry in products]
        try:
            return list(Product.objects.filter(id__in=ids))
        except (ValueError, ValidationError):
            return []

    @transaction.atomic
    def update_quantity(self, products: List[Dict[str, Any]]) -> None:
        now = timezone.now()
        for entry in products:
            Product.objects.filter(id=entry["id"]).update(
                quantity=entry["quantity"], updated_at=now
            )
        logger.info("product.quantities_updated", product_count=len(products))
