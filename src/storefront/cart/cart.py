"""Shopping cart aggregate — the shopper's basket for one session.

The cart holds at most one line per product. Adding a product already in the
cart bumps that line's quantity; quantities can be stepped up and down but
never below one (removing a line is a separate, explicit action). At most one
coupon is applied at a time, held as a value copy so registry changes do not
reach it. Totals are never stored; ``pricing`` derives them on every read.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, ValueObject

from storefront.cart.events import (
    CartCheckedOut,
    CartCouponApplied,
    CartCouponRejected,
    CartCouponRemoved,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)
from storefront.cart.pricing import price_cart
from storefront.coupon.coupon import AppliedCoupon
from storefront.domain import storefront


@storefront.entity(part_of="ShoppingCart")
class CartLine:
    """A product in the cart and how many of it.

    Name, price, category and image are taken from the catalogue product when
    the line is created.
    """

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price = Integer(required=True, min_value=0)
    category = String(max_length=50)
    image = String(max_length=500)
    quantity = Integer(required=True, min_value=1)
    position = Integer(default=0)
    added_at = DateTime()


@storefront.aggregate
class ShoppingCart:
    session_id = Identifier(identifier=True, required=True)
    items = HasMany(CartLine)
    applied_coupon = ValueObject(AppliedCoupon)
    coupon_error = String(max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(line.product_id) for line in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in the cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def lines(self):
        """Cart lines in the order they were first added."""
        return sorted(self.items, key=lambda line: line.position or 0)

    @property
    def item_count(self):
        return sum(line.quantity for line in self.items)

    @property
    def pricing(self):
        return price_cart(self.items, self.applied_coupon)

    def line_for(self, product_id):
        return next((line for line in self.items if str(line.product_id) == str(product_id)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product):
        """Add one unit of ``product``: a new line, or one more on its existing line."""
        now = datetime.now(UTC)
        line = self.line_for(product.id)

        if line:
            line.quantity += 1
        else:
            line = CartLine(
                product_id=str(product.id),
                name=product.name,
                unit_price=product.price,
                category=product.category,
                image=product.image,
                quantity=1,
                position=max((existing.position or 0 for existing in self.items), default=0) + 1,
                added_at=now,
            )
            self.add_items(line)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                session_id=str(self.session_id),
                product_id=str(product.id),
                quantity=line.quantity,
            )
        )

    def remove_item(self, product_id):
        """Drop the product's line. Nothing happens if it is not in the cart."""
        line = self.line_for(product_id)
        if line is None:
            return

        self.remove_items(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                session_id=str(self.session_id),
                product_id=str(product_id),
            )
        )

    def update_quantity(self, product_id, delta):
        """Step a line's quantity by ``delta``, stopping at one."""
        line = self.line_for(product_id)
        if line is None:
            return

        previous_quantity = line.quantity
        new_quantity = max(1, previous_quantity + delta)
        if new_quantity == previous_quantity:
            return

        line.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                session_id=str(self.session_id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def clear(self):
        for line in list(self.items):
            self.remove_items(line)
        self.updated_at = datetime.now(UTC)

    def check_out(self, order_id):
        """Empty the cart after its contents became order ``order_id``.

        The applied coupon stays; it belongs to the shopper, not to one order.
        """
        item_count = self.item_count
        self.clear()

        self.raise_(
            CartCheckedOut(
                session_id=str(self.session_id),
                order_id=str(order_id),
                item_count=item_count,
            )
        )

    # -------------------------------------------------------------------
    # Coupons
    # -------------------------------------------------------------------
    def apply_coupon(self, applied_coupon):
        """Use ``applied_coupon`` for pricing, replacing any coupon applied earlier."""
        self.applied_coupon = AppliedCoupon(
            code=applied_coupon.code,
            discount_percent=applied_coupon.discount_percent,
        )
        self.coupon_error = None
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCouponApplied(
                session_id=str(self.session_id),
                coupon_code=applied_coupon.code,
                discount_percent=applied_coupon.discount_percent,
            )
        )

    def reject_coupon(self, coupon_code, reason):
        """Record why a code was not accepted. Items and the applied coupon are untouched."""
        self.coupon_error = reason

        self.raise_(
            CartCouponRejected(
                session_id=str(self.session_id),
                coupon_code=coupon_code,
                reason=reason,
            )
        )

    def remove_coupon(self):
        if self.applied_coupon is None:
            return

        code = self.applied_coupon.code
        self.applied_coupon = None
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCouponRemoved(
                session_id=str(self.session_id),
                coupon_code=code,
            )
        )
