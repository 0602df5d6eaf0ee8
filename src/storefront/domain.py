"""Storefront bounded context — catalogue, cart, coupons, checkout and orders.

Every aggregate lives in process memory for the lifetime of the process.
Carts and wishlists are keyed by the shopper's session id; orders carry the
session id that placed them.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
