from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import OrderOutputDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


class Command(BaseCommand):
    help = "Print an order as JSON, or a notice if it does not exist."

    def add_arguments(self, parser) -> None:
        parser.add_argument("order_id", help="UUID of the order.")

    def handle(self, *args, **options):
        service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        order = service.find_order(options["order_id"])
        if order is None:
            self.stdout.write(
                self.style.WARNING(f"Order {options['order_id']} not found.")
            )
            return

        self.stdout.write(OrderOutputDTO.from_entity(order).model_dump_json(indent=2))
