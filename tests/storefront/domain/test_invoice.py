"""Tests for plain-text invoice rendering."""

from datetime import UTC, datetime

from storefront.cart.pricing import PriceSummary
from storefront.order.invoice import format_amount, invoice_filename, render_invoice
from storefront.order.order import Order


class _Line:
    def __init__(self, product_id, name, unit_price, quantity):
        self.product_id = product_id
        self.name = name
        self.unit_price = unit_price
        self.quantity = quantity
        self.category = None
        self.image = None


def _order(discount=0, coupon_code=None):
    lines = [
        _Line("prod-001", "Premium Wireless Headphones", 12999, 1),
        _Line("prod-002", "Minimalist Leather Watch", 4500, 2),
    ]
    order = Order.place(
        order_id="ORD-INV000001",
        session_id="sess-001",
        sequence=1,
        lines=lines,
        pricing=PriceSummary(subtotal=21999, discount=discount, total=21999 - discount),
        coupon_code=coupon_code,
    )
    order.placed_at = datetime(2024, 3, 5, 14, 7, 9, tzinfo=UTC)
    return order


class TestFormatAmount:
    def test_groups_thousands(self):
        assert format_amount(21999) == "₹21,999"

    def test_small_amount(self):
        assert format_amount(899) == "₹899"


class TestRenderInvoice:
    def test_plain_invoice(self):
        text = render_invoice(_order())
        assert text == "\n".join(
            [
                "SWIFTCART INVOICE",
                "Order ID: ORD-INV000001",
                "Date: 2024-03-05 14:07:09",
                "Status: Pending",
                "",
                "ITEMS:",
                "- Premium Wireless Headphones x1: ₹12,999",
                "- Minimalist Leather Watch x2: ₹9,000",
                "",
                "TOTAL: ₹21,999",
                "",
                "Thank you for shopping with SwiftCart!",
            ]
        )

    def test_discount_lines_shown_when_discounted(self):
        text = render_invoice(_order(discount=2200, coupon_code="WELCOME10"))
        assert "SUBTOTAL: ₹21,999" in text
        assert "DISCOUNT (WELCOME10): -₹2,200" in text
        assert "TOTAL: ₹19,799" in text

    def test_reflects_current_status(self):
        order = _order()
        order.override_status("Shipped")
        assert "Status: Shipped" in render_invoice(order)

    def test_filename(self):
        assert invoice_filename(_order()) == "invoice-ORD-INV000001.txt"
