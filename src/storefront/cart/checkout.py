"""Checkout — turns the session's cart into an order.

The order and the emptied cart are written in the same unit of work. An
empty cart makes checkout a no-op: nothing is created and ``None`` is
returned.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront
from storefront.order.ledger import new_order_id, next_sequence
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="ShoppingCart")
class Checkout:
    session_id = Identifier(required=True)


@storefront.command_handler(part_of=ShoppingCart)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.get(command.session_id)

        if not cart.items:
            logger.debug("Checkout skipped, cart is empty", session_id=str(command.session_id))
            return None

        pricing = cart.pricing
        order = Order.place(
            order_id=new_order_id(),
            session_id=str(cart.session_id),
            sequence=next_sequence(cart.session_id),
            lines=cart.lines,
            pricing=pricing,
            coupon_code=cart.applied_coupon.code if cart.applied_coupon else None,
        )
        current_domain.repository_for(Order).add(order)

        cart.check_out(order.order_id)
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.order_id),
            session_id=str(cart.session_id),
            total=pricing.total,
            discount=pricing.discount,
        )
        return str(order.order_id)
