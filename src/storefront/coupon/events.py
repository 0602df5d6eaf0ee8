"""Domain events for the Coupon aggregate."""

from protean.fields import Float, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Coupon")
class CouponRegistered:
    """A new coupon code was created by the store admin."""

    __version__ = 1

    code = Identifier(required=True)
    discount_percent = Float(required=True)


@storefront.event(part_of="Coupon")
class CouponActivated:
    __version__ = 1

    code = Identifier(required=True)


@storefront.event(part_of="Coupon")
class CouponDeactivated:
    __version__ = 1

    code = Identifier(required=True)
