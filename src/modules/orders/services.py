"""Order service layer (Use Cases).

Orchestrates order placement and order look-up against injected
repositories.  Every check runs before the first write, so a rejected
order leaves all stores untouched.

Business rules enforced (first violation wins):
- The customer must exist.
- At least one requested product must exist.
- Every requested product must exist.
- Every requested quantity must fit within the product's stock.

Order creation and the stock decrement are two separate repository
calls.  If the process dies between them the order is stored but stock
is not decremented; stores needing stronger guarantees must coordinate
that themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

import structlog

from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    ProductNotFound,
)

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Place an order and decrement stock for every ordered product.

        Steps:
        1. Validate the customer exists.
        2. Fetch all requested products in one batch.
        3. Validate every product exists and has enough stock.
        4. Persist the order with items priced from the product records.
        5. Write back the reduced stock quantities.

        Raises:
            CustomerNotFound: customer does not exist.
            NoProductsFound: none of the requested products exist.
            ProductNotFound: a requested product does not exist.
            InsufficientStock: a requested quantity exceeds stock.
        """
        log = logger.bind(customer_id=str(dto.customer_id))
        log.info("order.creation_started", item_count=len(dto.items))

        # 1. Validate customer
        customer = self._customer_repo.get_by_id(str(dto.customer_id))
        if not customer:
            log.warning("order.customer_not_found")
            raise CustomerNotFound(f"Customer {dto.customer_id} not found.")

        # 2. Batch look-up
        found = self._product_repo.find_all_by_id(
            [{"id": item.product_id, "quantity": item.quantity} for item in dto.items]
        )
        if not found:
            log.warning("order.no_products_found")
            raise NoProductsFound("Could not find any product with the given ids.")

        products = _index_by_id(found)

        # 3. Existence, then stock; existence errors take precedence
        for item in dto.items:
            if str(item.product_id) not in products:
                log.warning("order.product_not_found", product_id=str(item.product_id))
                raise ProductNotFound(f"Product {item.product_id} not found.")

        for item in dto.items:
            product = products[str(item.product_id)]
            if product.quantity < item.quantity:
                log.warning(
                    "order.insufficient_stock",
                    product_id=str(item.product_id),
                    requested=item.quantity,
                    available=product.quantity,
                )
                raise InsufficientStock(
                    f"Product {item.product_id}: requested {item.quantity}, "
                    f"available {product.quantity}."
                )

        # 4. Persist order + items with snapshotted prices
        order_items: List[Dict[str, Any]] = [
            {
                "product_id": item.product_id,
                "quantity": item.quantity,
                "price": products[str(item.product_id)].price,
            }
            for item in dto.items
        ]
        order = self._order_repo.create({"customer": customer, "products": order_items})
        log = log.bind(order_id=str(order.id))
        log.info("order.created")

        # 5. Decrement stock
        self._product_repo.update_quantity(
            [
                {
                    "id": item.product_id,
                    "quantity": products[str(item.product_id)].quantity - item.quantity,
                }
                for item in dto.items
            ]
        )
        log.info("order.stock_updated", product_count=len(dto.items))

        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_order(self, order_id: str) -> Optional[Order]:
        """Retrieve a single order by ID, or ``None`` if it does not exist."""
        order = self._order_repo.get_by_id(str(order_id))
        logger.info("order.retrieved", order_id=str(order_id), found=order is not None)
        return order


def _index_by_id(products: Iterable[Product]) -> Dict[str, Product]:
    """Map ``str(product.id)`` to product, keeping the first of any duplicates."""
    index: Dict[str, Product] = {}
    for product in products:
        index.setdefault(str(product.id), product)
    return index
