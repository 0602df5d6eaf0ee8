"""FastAPI routes for the Storefront — sessions, catalogue, carts, orders,
coupons, wishlists and the admin dashboard."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse, Response
from protean.utils.globals import current_domain

from storefront.api.auth import require_admin
from storefront.api.schemas import (
    AddToCartRequest,
    ApplyCouponRequest,
    CartResponse,
    CheckoutResponse,
    CouponCodeResponse,
    CouponSchema,
    CreateCouponRequest,
    CreateProductRequest,
    OrderSchema,
    ProductIdResponse,
    ProductSchema,
    ReturnOrderRequest,
    SessionResponse,
    SetCouponActiveRequest,
    StatusResponse,
    StoreStatsResponse,
    ToggleWishlistRequest,
    ToggleWishlistResponse,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    WishlistResponse,
)
from storefront.cart.cart import ShoppingCart
from storefront.cart.checkout import Checkout
from storefront.cart.coupons import ApplyCouponToCart, RemoveCouponFromCart
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.catalogue.management import AddProduct, RemoveProduct, list_products
from storefront.coupon.registry import (
    DeleteCoupon,
    RegisterCoupon,
    SetCouponActive,
    ToggleCoupon,
    list_coupons,
)
from storefront.order.invoice import invoice_filename, render_invoice
from storefront.order.ledger import all_orders, order_history
from storefront.order.order import Order
from storefront.order.returns import ReturnOrder
from storefront.order.status import UpdateOrderStatus
from storefront.projections.store_stats import store_stats
from storefront.session.opening import OpenSession
from storefront.wishlist.management import ToggleWishlistItem, wishlist_products
from storefront.wishlist.wishlist import Wishlist

# ---------------------------------------------------------------------------
# Session Router
# ---------------------------------------------------------------------------
session_router = APIRouter(prefix="/sessions", tags=["sessions"])


@session_router.post("", status_code=201, response_model=SessionResponse)
async def open_session() -> SessionResponse:
    session_id = current_domain.process(OpenSession(), asynchronous=False)
    return SessionResponse(session_id=session_id)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductSchema])
async def browse_products(q: str | None = None) -> list[ProductSchema]:
    return [ProductSchema.from_product(p) for p in list_products(search=q)]


@product_router.post(
    "",
    status_code=201,
    response_model=ProductIdResponse,
    dependencies=[Depends(require_admin)],
)
async def add_product(body: CreateProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        price=body.price,
        category=body.category,
        image=body.image,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=product_id)


@product_router.delete(
    "/{product_id}",
    response_model=StatusResponse,
    dependencies=[Depends(require_admin)],
)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


def _cart_response(session_id: str) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).get(session_id)
    return CartResponse.from_cart(cart)


@cart_router.get("/{session_id}", response_model=CartResponse)
async def view_cart(session_id: str) -> CartResponse:
    return _cart_response(session_id)


@cart_router.post("/{session_id}/items", response_model=CartResponse)
async def add_cart_item(session_id: str, body: AddToCartRequest) -> CartResponse:
    command = AddToCart(session_id=session_id, product_id=body.product_id)
    current_domain.process(command, asynchronous=False)
    return _cart_response(session_id)


@cart_router.patch("/{session_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item_quantity(
    session_id: str, product_id: str, body: UpdateCartQuantityRequest
) -> CartResponse:
    command = UpdateCartQuantity(session_id=session_id, product_id=product_id, delta=body.delta)
    current_domain.process(command, asynchronous=False)
    return _cart_response(session_id)


@cart_router.delete("/{session_id}/items/{product_id}", response_model=CartResponse)
async def remove_cart_item(session_id: str, product_id: str) -> CartResponse:
    command = RemoveFromCart(session_id=session_id, product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return _cart_response(session_id)


@cart_router.post("/{session_id}/coupon", response_model=CartResponse)
async def apply_cart_coupon(session_id: str, body: ApplyCouponRequest) -> CartResponse:
    command = ApplyCouponToCart(session_id=session_id, coupon_code=body.coupon_code)
    applied = current_domain.process(command, asynchronous=False)
    response = _cart_response(session_id)
    if not applied:
        raise HTTPException(status_code=400, detail=response.coupon_error)
    return response


@cart_router.delete("/{session_id}/coupon", response_model=CartResponse)
async def remove_cart_coupon(session_id: str) -> CartResponse:
    current_domain.process(RemoveCouponFromCart(session_id=session_id), asynchronous=False)
    return _cart_response(session_id)


@cart_router.post("/{session_id}/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout_cart(session_id: str, response: Response) -> CheckoutResponse:
    """Place an order from the cart. An empty cart places nothing and answers 200."""
    order_id = current_domain.process(Checkout(session_id=session_id), asynchronous=False)
    if order_id is None:
        response.status_code = 200
    return CheckoutResponse(order_id=order_id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderSchema])
async def list_session_orders(session_id: str) -> list[OrderSchema]:
    return [OrderSchema.from_order(order) for order in order_history(session_id)]


@order_router.get("/{order_id}", response_model=OrderSchema)
async def get_order(order_id: str) -> OrderSchema:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderSchema.from_order(order)


@order_router.get("/{order_id}/invoice", response_class=PlainTextResponse)
async def download_invoice(order_id: str) -> PlainTextResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return PlainTextResponse(
        render_invoice(order),
        headers={"Content-Disposition": f'attachment; filename="{invoice_filename(order)}"'},
    )


@order_router.post("/{order_id}/return", response_model=StatusResponse)
async def return_order(order_id: str, body: ReturnOrderRequest) -> StatusResponse:
    command = ReturnOrder(order_id=order_id, session_id=body.session_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put(
    "/{order_id}/status",
    response_model=StatusResponse,
    dependencies=[Depends(require_admin)],
)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Coupon Router (admin)
# ---------------------------------------------------------------------------
coupon_router = APIRouter(prefix="/coupons", tags=["coupons"], dependencies=[Depends(require_admin)])


@coupon_router.get("", response_model=list[CouponSchema])
async def list_registered_coupons() -> list[CouponSchema]:
    return [
        CouponSchema(code=c.code, discount_percent=c.discount_percent, is_active=c.is_active) for c in list_coupons()
    ]


@coupon_router.post("", status_code=201, response_model=CouponCodeResponse)
async def register_coupon(body: CreateCouponRequest) -> CouponCodeResponse:
    command = RegisterCoupon(code=body.code, discount_percent=body.discount_percent)
    code = current_domain.process(command, asynchronous=False)
    return CouponCodeResponse(code=code)


@coupon_router.put("/{code}/active", response_model=StatusResponse)
async def set_coupon_active(code: str, body: SetCouponActiveRequest) -> StatusResponse:
    current_domain.process(SetCouponActive(code=code, active=body.active), asynchronous=False)
    return StatusResponse()


@coupon_router.put("/{code}/toggle", response_model=StatusResponse)
async def toggle_coupon(code: str) -> StatusResponse:
    current_domain.process(ToggleCoupon(code=code), asynchronous=False)
    return StatusResponse()


@coupon_router.delete("/{code}", response_model=StatusResponse)
async def delete_coupon(code: str) -> StatusResponse:
    current_domain.process(DeleteCoupon(code=code), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Wishlist Router
# ---------------------------------------------------------------------------
wishlist_router = APIRouter(prefix="/wishlists", tags=["wishlists"])


@wishlist_router.get("/{session_id}", response_model=WishlistResponse)
async def view_wishlist(session_id: str) -> WishlistResponse:
    wishlist = current_domain.repository_for(Wishlist).get(session_id)
    return WishlistResponse(
        session_id=session_id,
        product_ids=wishlist.members,
        products=[ProductSchema.from_product(p) for p in wishlist_products(session_id)],
    )


@wishlist_router.post("/{session_id}", response_model=ToggleWishlistResponse)
async def toggle_wishlist_item(session_id: str, body: ToggleWishlistRequest) -> ToggleWishlistResponse:
    command = ToggleWishlistItem(session_id=session_id, product_id=body.product_id)
    saved = current_domain.process(command, asynchronous=False)
    return ToggleWishlistResponse(product_id=body.product_id, saved=saved)


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@admin_router.get("/orders", response_model=list[OrderSchema])
async def list_all_orders() -> list[OrderSchema]:
    return [OrderSchema.from_order(order) for order in all_orders()]


@admin_router.get("/stats", response_model=StoreStatsResponse)
async def dashboard_stats() -> StoreStatsResponse:
    stats = store_stats()
    return StoreStatsResponse(revenue=stats.revenue or 0, total_orders=stats.total_orders or 0)
