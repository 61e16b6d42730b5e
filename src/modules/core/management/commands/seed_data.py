from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.customers.models import Customer
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with sample customers and products."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        products = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={len(customers)}, "
                f"products={len(products)}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ana Souza", "ana@example.com"),
            ("Bruno Lima", "bruno@example.com"),
            ("Carla Mendes", "carla@example.com"),
            ("Daniel Costa", "daniel@example.com"),
            ("Helena Ferreira", "helena@example.com"),
        ]
        for name, email in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                email=email,
                defaults={"name": name},
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Monitor 27\"", Decimal("1299.90")),
            ("Mechanical Keyboard", Decimal("399.90")),
            ("Gaming Mouse", Decimal("249.90")),
            ("Headset", Decimal("299.90")),
            ("Office Desk", Decimal("899.00")),
            ("Ergonomic Chair", Decimal("1499.00")),
            ("A4 Paper", Decimal("29.90")),
            ("Blue Pen", Decimal("4.90")),
            ("Notebook", Decimal("19.90")),
            ("LED Lamp", Decimal("59.90")),
        ]
        for name, price in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "quantity": random.randint(10, 200),
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
