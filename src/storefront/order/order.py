"""Order aggregate — a placed order and its fulfilment status.

An order is created only by checking out a cart. Its line items are copies
of the cart lines at that moment and its totals are fixed then; nothing that
happens to the catalogue, the coupon registry or the cart afterwards changes
them. Orders are never deleted.

State Machine:
    PENDING → SHIPPED → DELIVERED      (forward path)
    DELIVERED → RETURNED               (customer return)

Admins may also set any status directly from any status; that override is a
separate entry point from the guarded forward and return transitions.
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    RETURNED = "Returned"


class StatusActor(Enum):
    ADMIN = "Admin"
    CUSTOMER = "Customer"


# Guarded transitions; admin overrides bypass this map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.SHIPPED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: {OrderStatus.RETURNED},
    OrderStatus.RETURNED: set(),
}


def generate_order_id():
    return f"ORD-{uuid4().hex[:9].upper()}"


def parse_status(value):
    """Map a status name (``"Shipped"``) or enum member to ``OrderStatus``."""
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        raise ValidationError(
            {"status": [f"Unknown order status {value!r}. Expected one of: {', '.join(s.value for s in OrderStatus)}"]}
        ) from None


@storefront.entity(part_of="Order")
class OrderLine:
    """A purchased product, copied from the cart line at checkout."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price = Integer(required=True, min_value=0)
    category = String(max_length=50)
    image = String(max_length=500)
    quantity = Integer(required=True, min_value=1)
    position = Integer(default=0)

    @property
    def line_total(self):
        return self.unit_price * self.quantity


@storefront.aggregate
class Order:
    order_id = Identifier(identifier=True, required=True)
    session_id = Identifier(required=True)
    sequence = Integer(required=True, min_value=1)
    items = HasMany(OrderLine)
    subtotal = Integer(required=True, min_value=0)
    discount = Integer(default=0, min_value=0)
    total = Integer(required=True, min_value=0)
    coupon_code = String(max_length=50)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    placed_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, order_id, session_id, sequence, lines, pricing, coupon_code=None):
        """Create a Pending order from cart lines and the pricing computed for them.

        Args:
            order_id: Identifier for the new order.
            session_id: The shopping session that checked out.
            sequence: 1 for the session's first order, 2 for the next, and so on.
            lines: Cart lines to copy, in display order.
            pricing: ``PriceSummary`` for those lines at checkout time.
            coupon_code: Code of the coupon that priced the order, if any.
        """
        now = datetime.now(UTC)
        order = cls(
            order_id=order_id,
            session_id=session_id,
            sequence=sequence,
            subtotal=pricing.subtotal,
            discount=pricing.discount,
            total=pricing.total,
            coupon_code=coupon_code,
            status=OrderStatus.PENDING.value,
            placed_at=now,
            updated_at=now,
        )
        for position, line in enumerate(lines, start=1):
            order.add_items(
                OrderLine(
                    product_id=str(line.product_id),
                    name=line.name,
                    unit_price=line.unit_price,
                    category=line.category,
                    image=line.image,
                    quantity=line.quantity,
                    position=position,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.order_id),
                session_id=str(session_id),
                subtotal=order.subtotal,
                discount=order.discount,
                total=order.total,
                item_count=order.item_count,
                coupon_code=coupon_code,
                placed_at=now,
            )
        )
        return order

    @property
    def lines(self):
        return sorted(self.items, key=lambda line: line.position or 0)

    @property
    def item_count(self):
        return sum(line.quantity for line in self.items)

    # -------------------------------------------------------------------
    # State transition helpers
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def _change_status(self, target_status, actor):
        previous = OrderStatus(self.status)
        now = datetime.now(UTC)
        self.status = target_status.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.order_id),
                previous_status=previous.value,
                new_status=target_status.value,
                changed_by=actor.value,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Admin entry points
    # -------------------------------------------------------------------
    def ship(self):
        self._assert_can_transition(OrderStatus.SHIPPED)
        self._change_status(OrderStatus.SHIPPED, StatusActor.ADMIN)

    def deliver(self):
        self._assert_can_transition(OrderStatus.DELIVERED)
        self._change_status(OrderStatus.DELIVERED, StatusActor.ADMIN)

    def override_status(self, status):
        """Set any status regardless of the current one. Setting the current status is a no-op."""
        target = parse_status(status)
        if OrderStatus(self.status) == target:
            return
        self._change_status(target, StatusActor.ADMIN)

    # -------------------------------------------------------------------
    # Customer entry point
    # -------------------------------------------------------------------
    def request_return(self):
        """Return a delivered order."""
        current = OrderStatus(self.status)
        if current != OrderStatus.DELIVERED:
            raise ValidationError({"status": [f"Only delivered orders can be returned, order is {current.value}"]})
        self._change_status(OrderStatus.RETURNED, StatusActor.CUSTOMER)
