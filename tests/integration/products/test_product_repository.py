"""Integration tests for ProductDjangoRepository."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.integration


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


@pytest.fixture()
def keyboard():
    return Product.objects.create(name="Keyboard", price=Decimal("399.90"), quantity=10)


@pytest.fixture()
def mouse():
    return Product.objects.create(name="Mouse", price=Decimal("249.90"), quantity=4)


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self):
        assert isinstance(ProductDjangoRepository(), IProductRepository)


class TestCreateAndGet:
    def test_create_persists_product(self, repo):
        product = repo.create({"name": "Headset", "price": Decimal("299.90"), "quantity": 7})

        stored = repo.get_by_id(str(product.id))
        assert stored.name == "Headset"
        assert stored.price == Decimal("299.90")
        assert stored.quantity == 7

    def test_get_by_id_invalid_uuid_returns_none(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestFindAllById:
    def test_returns_only_matches(self, repo, keyboard, mouse):
        found = repo.find_all_by_id(
            [
                {"id": keyboard.id, "quantity": 1},
                {"id": uuid4(), "quantity": 1},
                {"id": mouse.id, "quantity": 2},
            ]
        )

        assert {p.id for p in found} == {keyboard.id, mouse.id}

    def test_no_matches_returns_empty_list(self, repo, keyboard):
        assert repo.find_all_by_id([{"id": uuid4(), "quantity": 1}]) == []

    def test_malformed_id_returns_empty_list(self, repo, keyboard):
        assert repo.find_all_by_id([{"id": "bogus", "quantity": 1}]) == []


class TestUpdateQuantity:
    def test_sets_absolute_quantities(self, repo, keyboard, mouse):
        repo.update_quantity(
            [
                {"id": keyboard.id, "quantity": 3},
                {"id": mouse.id, "quantity": 0},
            ]
        )

        keyboard.refresh_from_db()
        mouse.refresh_from_db()
        assert keyboard.quantity == 3
        assert mouse.quantity == 0

    def test_leaves_other_products_alone(self, repo, keyboard, mouse):
        repo.update_quantity([{"id": keyboard.id, "quantity": 1}])

        mouse.refresh_from_db()
        assert mouse.quantity == 4
