"""In-memory repositories satisfying the store interfaces.

They keep plain dataclass records and count writes, so service
behaviour can be asserted without the ORM.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

import pytest

from modules.customers.repositories.interfaces import ICustomerRepository
from modules.orders.repositories.interfaces import IOrderRepository
from modules.orders.services import OrderService
from modules.products.repositories.interfaces import IProductRepository


@dataclass
class FakeCustomer:
    id: UUID
    name: str = "Customer"


@dataclass
class FakeProduct:
    id: UUID
    price: Decimal
    quantity: int
    name: str = "Product"


@dataclass
class FakeOrderItem:
    product_id: UUID
    quantity: int
    price: Decimal


@dataclass
class FakeOrder:
    id: UUID
    customer: FakeCustomer
    items: List[FakeOrderItem] = field(default_factory=list)


class InMemoryCustomerRepository(ICustomerRepository):
    def __init__(self) -> None:
        self.customers: Dict[str, FakeCustomer] = {}

    def get_by_id(self, id: str) -> Optional[FakeCustomer]:
        return self.customers.get(str(id))

    def create(self, data: Dict[str, Any]) -> FakeCustomer:
        customer = FakeCustomer(id=uuid4(), name=data.get("name", "Customer"))
        self.customers[str(customer.id)] = customer
        return customer


class InMemoryProductRepository(IProductRepository):
    def __init__(self) -> None:
        self.products: Dict[str, FakeProduct] = {}
        self.update_calls: List[List[Dict[str, Any]]] = []

    def get_by_id(self, id: str) -> Optional[FakeProduct]:
        return self.products.get(str(id))

    def create(self, data: Dict[str, Any]) -> FakeProduct:
        product = FakeProduct(
            id=uuid4(),
            price=Decimal(data["price"]),
            quantity=data.get("quantity", 0),
            name=data.get("name", "Product"),
        )
        self.products[str(product.id)] = product
        return product

    def find_all_by_id(self, products: List[Dict[str, Any]]) -> List[FakeProduct]:
        # Reverse so callers cannot rely on input order.
        matches = [
            self.products[str(entry["id"])]
            for entry in products
            if str(entry["id"]) in self.products
        ]
        return [
            FakeProduct(id=p.id, price=p.price, quantity=p.quantity, name=p.name)
            for p in reversed(matches)
        ]

    def update_quantity(self, products: List[Dict[str, Any]]) -> None:
        self.update_calls.append(list(products))
        for entry in products:
            self.products[str(entry["id"])].quantity = entry["quantity"]


class InMemoryOrderRepository(IOrderRepository):
    def __init__(self) -> None:
        self.orders: Dict[str, FakeOrder] = {}
        self.create_calls = 0

    def get_by_id(self, id: str) -> Optional[FakeOrder]:
        return self.orders.get(str(id))

    def create(self, data: Dict[str, Any]) -> FakeOrder:
        self.create_calls += 1
        order = FakeOrder(
            id=uuid4(),
            customer=data["customer"],
            items=[
                FakeOrderItem(
                    product_id=item["product_id"],
                    quantity=item["quantity"],
                    price=item["price"],
                )
                for item in data["products"]
            ],
        )
        self.orders[str(order.id)] = order
        return order


@dataclass
class Stores:
    customers: InMemoryCustomerRepository
    products: InMemoryProductRepository
    orders: InMemoryOrderRepository
    service: OrderService


@pytest.fixture()
def stores() -> Stores:
    customers = InMemoryCustomerRepository()
    products = InMemoryProductRepository()
    orders = InMemoryOrderRepository()
    service = OrderService(
        order_repository=orders,
        customer_repository=customers,
        product_repository=products,
    )
    return Stores(customers, products, orders, service)
