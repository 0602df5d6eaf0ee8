"""Plain-text invoices for placed orders.

Rendering reads only the order's own snapshot, so an invoice always shows
what was charged at checkout.
"""

STORE_NAME = "SwiftCart"
CURRENCY_SYMBOL = "₹"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_amount(amount):
    return f"{CURRENCY_SYMBOL}{amount:,}"


def render_invoice(order):
    """Render ``order`` as the text of a downloadable invoice."""
    placed_at = order.placed_at.strftime(DATE_FORMAT) if order.placed_at else ""
    lines = [
        f"{STORE_NAME.upper()} INVOICE",
        f"Order ID: {order.order_id}",
        f"Date: {placed_at}",
        f"Status: {order.status}",
        "",
        "ITEMS:",
    ]
    lines.extend(f"- {line.name} x{line.quantity}: {format_amount(line.line_total)}" for line in order.lines)

    if order.discount:
        lines.extend(
            [
                "",
                f"SUBTOTAL: {format_amount(order.subtotal)}",
                f"DISCOUNT ({order.coupon_code}): -{format_amount(order.discount)}",
            ]
        )

    lines.extend(
        [
            "",
            f"TOTAL: {format_amount(order.total)}",
            "",
            f"Thank you for shopping with {STORE_NAME}!",
        ]
    )
    return "\n".join(lines)


def invoice_filename(order):
    return f"invoice-{order.order_id}.txt"
