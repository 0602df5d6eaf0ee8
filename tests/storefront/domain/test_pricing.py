"""Tests for cart pricing rules."""

from storefront.cart.pricing import discount_for, line_total, price_cart, subtotal_of
from storefront.coupon.coupon import AppliedCoupon


class _Line:
    def __init__(self, unit_price, quantity):
        self.unit_price = unit_price
        self.quantity = quantity


class TestLineTotals:
    def test_line_total_multiplies_price_by_quantity(self):
        assert line_total(_Line(4500, 3)) == 13500

    def test_subtotal_sums_lines(self):
        assert subtotal_of([_Line(12999, 1), _Line(4500, 2)]) == 21999

    def test_subtotal_of_nothing_is_zero(self):
        assert subtotal_of([]) == 0


class TestDiscount:
    def test_ten_percent_rounds_to_nearest(self):
        assert discount_for(21999, 10) == 2200

    def test_exact_half_rounds_to_even_down(self):
        assert discount_for(25, 10) == 2

    def test_exact_half_rounds_to_even_up(self):
        assert discount_for(35, 10) == 4

    def test_fractional_percent(self):
        assert discount_for(1000, 12.5) == 125

    def test_zero_percent_gives_no_discount(self):
        assert discount_for(5000, 0) == 0

    def test_zero_subtotal_gives_no_discount(self):
        assert discount_for(0, 50) == 0

    def test_discount_is_capped_at_subtotal(self):
        assert discount_for(1000, 150) == 1000


class TestPriceCart:
    def test_without_coupon_total_equals_subtotal(self):
        summary = price_cart([_Line(12999, 1), _Line(4500, 2)])
        assert summary.subtotal == 21999
        assert summary.discount == 0
        assert summary.total == 21999

    def test_with_coupon(self):
        coupon = AppliedCoupon(code="WELCOME10", discount_percent=10)
        summary = price_cart([_Line(12999, 1), _Line(4500, 2)], coupon)
        assert summary.discount == 2200
        assert summary.total == 19799

    def test_total_never_negative(self):
        coupon = AppliedCoupon(code="MEGA", discount_percent=150)
        summary = price_cart([_Line(899, 2)], coupon)
        assert summary.discount == 1798
        assert summary.total == 0

    def test_empty_cart_with_coupon_is_zero(self):
        coupon = AppliedCoupon(code="WELCOME10", discount_percent=10)
        summary = price_cart([], coupon)
        assert summary.subtotal == 0
        assert summary.discount == 0
        assert summary.total == 0
