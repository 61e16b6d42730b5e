"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
Outer layers (management commands, a future API) catch these and
translate them into their own error responses.  ``code`` is a stable
machine-readable identifier; the message is the human-readable detail.
"""

from __future__ import annotations


class OrderCreationError(Exception):
    """Base class for every reason an order could not be placed."""

    code = "order_creation_error"


class CustomerNotFound(OrderCreationError):
    """The customer referenced by the order does not exist."""

    code = "customer_not_found"


class NoProductsFound(OrderCreationError):
    """None of the requested product ids matched a product."""

    code = "no_products_found"


class ProductNotFound(OrderCreationError):
    """A requested product id had no match while others did."""

    code = "product_not_found"


class InsufficientStock(OrderCreationError):
    """A requested quantity exceeds the product's available stock."""

    code = "insufficient_stock"
