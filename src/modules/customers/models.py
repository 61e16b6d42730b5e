"""Customer model.

The order workflow only checks that a customer exists; ``name`` and
``email`` are carried for operators and seed data.  ``email`` is unique
so a customer can be looked up unambiguously outside the order flow.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name
