"""Customer repository interface.

The order workflow needs existence look-ups only; creation is used by
seeding and tests.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key, or ``None`` if absent."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Customer:
        """Create a customer from ``name`` and ``email``."""
