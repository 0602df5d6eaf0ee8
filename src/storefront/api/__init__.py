"""Storefront API package."""

from storefront.api.routes import (
    admin_router,
    cart_router,
    coupon_router,
    order_router,
    product_router,
    session_router,
    wishlist_router,
)

__all__ = [
    "session_router",
    "product_router",
    "cart_router",
    "order_router",
    "coupon_router",
    "wishlist_router",
    "admin_router",
    "routers",
]

routers = [
    session_router,
    product_router,
    cart_router,
    order_router,
    coupon_router,
    wishlist_router,
    admin_router,
]
