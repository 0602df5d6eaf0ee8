"""Coupon aggregate — percentage discount codes managed by the store admin.

Codes are case-insensitive: they are stored upper-cased and every lookup
normalizes its input the same way. A shopper applying a code receives an
``AppliedCoupon``, a value copy of the coupon at that moment. Later changes
to the registry (deactivation, deletion) do not reach copies already handed
out.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, String

from storefront.coupon.events import CouponActivated, CouponDeactivated, CouponRegistered
from storefront.domain import storefront

INVALID_COUPON_MESSAGE = "Invalid or inactive coupon code"


def normalize_code(code):
    """Canonical form of a coupon code: trimmed and upper-case."""
    return (code or "").strip().upper()


class InvalidCoupon(ValidationError):
    """The code does not name an active coupon."""

    def __init__(self, code):
        self.code = code
        super().__init__({"coupon_code": [INVALID_COUPON_MESSAGE]})


@storefront.value_object
class AppliedCoupon:
    """Snapshot of a coupon taken when a shopper applied it."""

    code = String(required=True, max_length=50)
    discount_percent = Float(required=True, min_value=0.0)


@storefront.aggregate
class Coupon:
    code = String(identifier=True, required=True, max_length=50)
    discount_percent = Float(required=True, min_value=0.0)
    is_active = Boolean(default=True)
    created_at = DateTime()

    @classmethod
    def register(cls, code, discount_percent):
        """Create an active coupon. Percentages above 100 are accepted as given."""
        normalized = normalize_code(code)
        if not normalized:
            raise ValidationError({"code": ["Coupon code is required"]})

        coupon = cls(
            code=normalized,
            discount_percent=discount_percent,
            is_active=True,
            created_at=datetime.now(UTC),
        )
        coupon.raise_(
            CouponRegistered(
                code=coupon.code,
                discount_percent=coupon.discount_percent,
            )
        )
        return coupon

    def set_active(self, active):
        """Switch the coupon on or off. Setting the current state is a no-op."""
        active = bool(active)
        if self.is_active == active:
            return

        self.is_active = active
        if active:
            self.raise_(CouponActivated(code=self.code))
        else:
            self.raise_(CouponDeactivated(code=self.code))

    def toggle(self):
        self.set_active(not self.is_active)

    def snapshot(self):
        return AppliedCoupon(code=self.code, discount_percent=self.discount_percent)
