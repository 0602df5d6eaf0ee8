"""Order ledger — read side over placed orders."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.order.order import Order, generate_order_id


def order_history(session_id):
    """Orders placed in ``session_id``, most recent first."""
    orders = current_domain.repository_for(Order)._dao.query.filter(session_id=str(session_id)).all().items
    return sorted(orders, key=lambda o: o.sequence, reverse=True)


def all_orders():
    """Every placed order across sessions, most recent first."""
    orders = current_domain.repository_for(Order)._dao.query.all().items
    return sorted(orders, key=lambda o: (o.placed_at, o.sequence), reverse=True)


def next_sequence(session_id):
    return len(order_history(session_id)) + 1


def new_order_id():
    """An order id not used by any placed order."""
    repo = current_domain.repository_for(Order)
    while True:
        order_id = generate_order_id()
        try:
            repo.get(order_id)
        except ObjectNotFoundError:
            return order_id
