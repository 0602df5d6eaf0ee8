"""Order status administration — commands and handler.

These are admin actions. ``UpdateOrderStatus`` sets any status directly;
``ShipOrder`` and ``DeliverOrder`` walk the forward path and refuse to skip
steps.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@storefront.command(part_of="Order")
class ShipOrder:
    order_id = Identifier(required=True)


@storefront.command(part_of="Order")
class DeliverOrder:
    order_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class ManageOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status
        order.override_status(command.status)
        repo.add(order)

        if previous != order.status:
            logger.info(
                "Order status overridden",
                order_id=str(order.order_id),
                previous_status=previous,
                new_status=order.status,
            )

    @handle(ShipOrder)
    def ship(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.ship()
        repo.add(order)

    @handle(DeliverOrder)
    def deliver(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.deliver()
        repo.add(order)
