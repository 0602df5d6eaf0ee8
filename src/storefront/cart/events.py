"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the cart.

    Raised once per add, whether the product got a new line or an existing
    line's quantity went up. Presentation layers use it as the cue to draw
    attention to the cart.
    """

    __version__ = 1

    session_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    __version__ = 1

    session_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CartItemRemoved:
    __version__ = 1

    session_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="ShoppingCart")
class CartCouponApplied:
    __version__ = 1

    session_id = Identifier(required=True)
    coupon_code = String(required=True)
    discount_percent = Float(required=True)


@storefront.event(part_of="ShoppingCart")
class CartCouponRejected:
    """A shopper entered a code that is unknown or inactive."""

    __version__ = 1

    session_id = Identifier(required=True)
    coupon_code = String()
    reason = String(required=True)


@storefront.event(part_of="ShoppingCart")
class CartCouponRemoved:
    __version__ = 1

    session_id = Identifier(required=True)
    coupon_code = String(required=True)


@storefront.event(part_of="ShoppingCart")
class CartCheckedOut:
    """The cart's contents became an order and the cart was emptied."""

    __version__ = 1

    session_id = Identifier(required=True)
    order_id = Identifier(required=True)
    item_count = Integer(required=True)
