from __future__ import annotations

from uuid import UUID

from django.core.management.base import BaseCommand, CommandError
from pydantic import ValidationError

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO, OrderOutputDTO
from modules.orders.exceptions import OrderCreationError
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


def _parse_item(raw: str) -> CreateOrderItemDTO:
    product_id, sep, quantity = raw.rpartition(":")
    if not sep:
        raise CommandError(f"Invalid item '{raw}': expected PRODUCT_ID:QUANTITY.")
    try:
        return CreateOrderItemDTO(product_id=UUID(product_id), quantity=int(quantity))
    except (ValueError, ValidationError) as exc:
        raise CommandError(f"Invalid item '{raw}': {exc}") from exc


class Command(BaseCommand):
    help = "Place an order for a customer and print it as JSON."

    def add_arguments(self, parser) -> None:
        parser.add_argument("customer_id", help="UUID of the ordering customer.")
        parser.add_argument(
            "--item",
            action="append",
            dest="items",
            required=True,
            metavar="PRODUCT_ID:QUANTITY",
            help="Product and quantity to order (repeatable).",
        )

    def handle(self, *args, **options):
        items = [_parse_item(raw) for raw in options["items"]]
        try:
            dto = CreateOrderDTO(customer_id=options["customer_id"], items=items)
        except ValidationError as exc:
            raise CommandError(f"Invalid order: {exc}") from exc

        service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        try:
            order = service.create_order(dto)
        except OrderCreationError as exc:
            raise CommandError(f"[{exc.code}] {exc}") from exc

        order = service.find_order(str(order.id)) or order
        self.stdout.write(OrderOutputDTO.from_entity(order).model_dump_json(indent=2))
