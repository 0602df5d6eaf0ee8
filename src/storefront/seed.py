"""Starter catalogue and coupon for a fresh storefront."""

from protean.utils.globals import current_domain

from storefront.catalogue.management import AddProduct, list_products
from storefront.coupon.registry import RegisterCoupon, list_coupons
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INITIAL_PRODUCTS = [
    {
        "name": "Premium Wireless Headphones",
        "price": 12999,
        "category": "Electronics",
        "image": "https://picsum.photos/seed/headphones/400/400",
    },
    {
        "name": "Minimalist Leather Watch",
        "price": 4500,
        "category": "Accessories",
        "image": "https://picsum.photos/seed/watch/400/400",
    },
    {
        "name": "Smart Fitness Tracker",
        "price": 2999,
        "category": "Electronics",
        "image": "https://picsum.photos/seed/tracker/400/400",
    },
    {
        "name": "Ergonomic Coffee Mug",
        "price": 899,
        "category": "Home",
        "image": "https://picsum.photos/seed/mug/400/400",
    },
    {
        "name": "Organic Cotton T-Shirt",
        "price": 1200,
        "category": "Apparel",
        "image": "https://picsum.photos/seed/tshirt/400/400",
    },
]

INITIAL_COUPONS = [
    {"code": "WELCOME10", "discount_percent": 10},
]


def seed_storefront():
    """Load the starter data into an empty storefront. Does nothing if products or coupons exist."""
    if list_products() or list_coupons():
        logger.info("Storefront already seeded")
        return False

    # Newest-first listing shows the first product on top
    for product in reversed(INITIAL_PRODUCTS):
        current_domain.process(AddProduct(**product), asynchronous=False)
    for coupon in INITIAL_COUPONS:
        current_domain.process(RegisterCoupon(**coupon), asynchronous=False)

    logger.info("Storefront seeded", products=len(INITIAL_PRODUCTS), coupons=len(INITIAL_COUPONS))
    return True
