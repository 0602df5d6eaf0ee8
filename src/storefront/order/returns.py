"""Order returns — the customer-facing return action."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class ReturnOrder:
    """Return a delivered order on behalf of the shopper who placed it."""

    order_id = Identifier(required=True)
    session_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class ReturnOrderHandler:
    @handle(ReturnOrder)
    def return_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        if str(order.session_id) != str(command.session_id):
            raise ValidationError({"order_id": ["Order was not placed in this session"]})

        order.request_return()
        repo.add(order)
        logger.info("Order returned", order_id=str(order.order_id), session_id=str(order.session_id))
