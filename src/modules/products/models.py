"""Product model with price and stock control.

Business rules implemented:
- Name is unique in the catalog.
- Price must be greater than zero.
- Stock ``quantity`` cannot be negative.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root.

    ``quantity`` is the stock available for sale.  It is only decremented
    as a side effect of placing an order.
    """

    name = models.CharField(max_length=255, unique=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    quantity = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})
        if self.quantity is not None and self.quantity < 0:
            raise ValidationError({"quantity": "Stock quantity cannot be negative."})

    def __str__(self) -> str:
        return f"{self.name} ({self.quantity} in stock)"
