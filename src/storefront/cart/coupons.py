"""Cart coupon management — commands and handler.

Applying a code that the registry does not accept is an ordinary outcome for
the shopper, not a failure: the handler records the message on the cart and
reports ``False`` instead of raising.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.coupon.coupon import InvalidCoupon, normalize_code
from storefront.coupon.registry import validate_coupon
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="ShoppingCart")
class ApplyCouponToCart:
    """Apply a coupon code to a shopping cart."""

    session_id = Identifier(required=True)
    coupon_code = String(required=True, max_length=100)


@storefront.command(part_of="ShoppingCart")
class RemoveCouponFromCart:
    session_id = Identifier(required=True)


@storefront.command_handler(part_of=ShoppingCart)
class ApplyCouponHandler:
    @handle(ApplyCouponToCart)
    def apply_coupon(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.session_id)

        try:
            applied = validate_coupon(command.coupon_code)
        except InvalidCoupon as exc:
            reason = exc.messages["coupon_code"][0]
            cart.reject_coupon(normalize_code(command.coupon_code), reason)
            repo.add(cart)
            logger.info("Coupon rejected", session_id=str(cart.session_id), coupon_code=exc.code)
            return False

        cart.apply_coupon(applied)
        repo.add(cart)
        return True

    @handle(RemoveCouponFromCart)
    def remove_coupon(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.session_id)
        cart.remove_coupon()
        repo.add(cart)
