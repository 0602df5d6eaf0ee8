"""Store stats projection — revenue and order count for the admin dashboard.

Revenue is the sum of order totals as placed. Later status changes, returns
included, leave it alone.
"""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.events import OrderPlaced
from storefront.order.order import Order

STATS_KEY = "storefront"


@storefront.projection
class StoreStats:
    key = String(identifier=True, required=True, max_length=20)
    revenue = Integer(default=0)
    total_orders = Integer(default=0)


def _get_or_create():
    repo = current_domain.repository_for(StoreStats)
    try:
        return repo.get(STATS_KEY)
    except ObjectNotFoundError:
        return StoreStats(key=STATS_KEY, revenue=0, total_orders=0)


@storefront.projector(projector_for=StoreStats, aggregates=[Order])
class StoreStatsProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        record = _get_or_create()
        record.revenue = (record.revenue or 0) + event.total
        record.total_orders = (record.total_orders or 0) + 1
        current_domain.repository_for(StoreStats).add(record)


def store_stats():
    """Current dashboard figures; zeros before the first order."""
    return _get_or_create()
