"""Integration tests for the management commands."""

from __future__ import annotations

import json
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from modules.customers.models import Customer
from modules.orders.models import Order
from modules.products.models import Product

pytestmark = pytest.mark.integration


@pytest.fixture()
def customer():
    return Customer.objects.create(name="CLI Customer", email="cli@example.com")


@pytest.fixture()
def product():
    return Product.objects.create(name="CLI Product", price=Decimal("12.50"), quantity=4)


def _run(*args) -> str:
    out = StringIO()
    call_command(*args, stdout=out)
    return out.getvalue()


class TestSeedData:
    def test_seeds_customers_and_products(self):
        output = _run("seed_data")

        assert "Seed completed" in output
        assert Customer.objects.count() == 5
        assert Product.objects.count() == 10

    def test_is_idempotent(self):
        _run("seed_data")
        _run("seed_data")

        assert Customer.objects.count() == 5
        assert Product.objects.count() == 10


class TestPlaceOrder:
    def test_places_order_and_prints_json(self, customer, product):
        output = _run("place_order", str(customer.id), "--item", f"{product.id}:3")

        payload = json.loads(output)
        assert payload["customer_id"] == str(customer.id)
        assert payload["items"][0]["product_id"] == str(product.id)
        assert payload["items"][0]["quantity"] == 3
        assert Decimal(payload["total_amount"]) == Decimal("37.50")
        product.refresh_from_db()
        assert product.quantity == 1

    def test_business_error_becomes_command_error(self, customer, product):
        with pytest.raises(CommandError, match="insufficient_stock"):
            _run("place_order", str(customer.id), "--item", f"{product.id}:5")

        assert Order.objects.count() == 0

    def test_unknown_customer(self, product):
        with pytest.raises(CommandError, match="customer_not_found"):
            _run("place_order", str(uuid4()), "--item", f"{product.id}:1")

    def test_malformed_item(self, customer):
        with pytest.raises(CommandError, match="PRODUCT_ID:QUANTITY"):
            _run("place_order", str(customer.id), "--item", "no-separator")


class TestFindOrder:
    def test_prints_existing_order(self, customer, product):
        placed = json.loads(
            _run("place_order", str(customer.id), "--item", f"{product.id}:2")
        )

        found = json.loads(_run("find_order", placed["id"]))

        assert found == placed

    def test_missing_order_is_not_an_error(self):
        missing = str(uuid4())

        output = _run("find_order", missing)

        assert f"Order {missing} not found." in output
