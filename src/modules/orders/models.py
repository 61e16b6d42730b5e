"""Order and OrderItem models.

Business rules implemented:
- Customer FK uses PROTECT to preserve order history.
- OrderItem snapshots the product price at creation time (``price``).
- OrderItem quantity is at least 1.
- Orders are written once, together with their items, and never updated.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Order(BaseModel):
    """Order aggregate root: a customer plus an ordered list of items."""

    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]

    @property
    def total_amount(self) -> Decimal:
        """Sum of item subtotals at their snapshotted prices."""
        return sum((item.subtotal for item in self.items.all()), Decimal("0.00"))

    def __str__(self) -> str:
        return f"Order {self.id}"


class OrderItem(BaseModel):
    """Line item linking an Order to a Product.

    ``price`` is a **snapshot** of the product price at the time of
    purchase. It never changes even if the product price is updated later.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    price: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
    )

    class Meta:
        db_table = "order_items"
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
        ]

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.price

    def clean(self) -> None:
        super().clean()
        if self.quantity is not None and self.quantity < 1:
            raise ValidationError({"quantity": "Quantity must be at least 1."})

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} @ {self.price}"
