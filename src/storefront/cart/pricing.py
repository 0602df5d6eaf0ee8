"""Pricing — derives cart totals from line items and an optional coupon.

Pure functions over whatever is passed in; nothing is read from the
repositories, so the same rules price a live cart and an order snapshot.

All amounts are integers in the smallest currency unit. Fractional discounts
are rounded half-to-even, and the discount never exceeds the subtotal, so a
coupon above 100% brings the total to zero rather than below it.
"""

from decimal import ROUND_HALF_EVEN, Decimal

from protean.fields import Integer

from storefront.domain import storefront


@storefront.value_object
class PriceSummary:
    subtotal = Integer(default=0, min_value=0)
    discount = Integer(default=0, min_value=0)
    total = Integer(default=0, min_value=0)


def line_total(line) -> int:
    return line.unit_price * line.quantity


def subtotal_of(lines) -> int:
    return sum(line_total(line) for line in lines)


def discount_for(subtotal: int, discount_percent: float) -> int:
    """Discount on ``subtotal`` at ``discount_percent``, capped at the subtotal."""
    if not subtotal or not discount_percent:
        return 0

    raw = Decimal(subtotal) * Decimal(str(discount_percent)) / Decimal(100)
    amount = int(raw.quantize(Decimal(1), rounding=ROUND_HALF_EVEN))
    return min(max(amount, 0), subtotal)


def price_cart(lines, applied_coupon=None) -> PriceSummary:
    subtotal = subtotal_of(lines)
    discount = discount_for(subtotal, applied_coupon.discount_percent) if applied_coupon else 0
    return PriceSummary(
        subtotal=subtotal,
        discount=discount,
        total=max(subtotal - discount, 0),
    )
