"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands and aggregates.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class SessionResponse(BaseModel):
    session_id: str


class PricingSchema(BaseModel):
    subtotal: int
    discount: int
    total: int

    @classmethod
    def from_summary(cls, summary) -> "PricingSchema":
        return cls(subtotal=summary.subtotal, discount=summary.discount, total=summary.total)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    id: str
    name: str
    price: int
    category: str | None = None
    image: str | None = None

    @classmethod
    def from_product(cls, product) -> "ProductSchema":
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            category=product.category,
            image=product.image,
        )


class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    category: str | None = None
    image: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Smart Fitness Tracker",
                    "price": 2999,
                    "category": "Electronics",
                    "image": None,
                }
            ]
        }
    }


class ProductIdResponse(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartLineSchema(BaseModel):
    product_id: str
    name: str
    unit_price: int
    quantity: int
    line_total: int
    category: str | None = None
    image: str | None = None


class AppliedCouponSchema(BaseModel):
    code: str
    discount_percent: float


class CartResponse(BaseModel):
    session_id: str
    items: list[CartLineSchema]
    item_count: int
    applied_coupon: AppliedCouponSchema | None = None
    coupon_error: str | None = None
    pricing: PricingSchema

    @classmethod
    def from_cart(cls, cart) -> "CartResponse":
        coupon = cart.applied_coupon
        return cls(
            session_id=str(cart.session_id),
            items=[
                CartLineSchema(
                    product_id=str(line.product_id),
                    name=line.name,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    line_total=line.unit_price * line.quantity,
                    category=line.category,
                    image=line.image,
                )
                for line in cart.lines
            ],
            item_count=cart.item_count,
            applied_coupon=(
                AppliedCouponSchema(code=coupon.code, discount_percent=coupon.discount_percent) if coupon else None
            ),
            coupon_error=cart.coupon_error,
            pricing=PricingSchema.from_summary(cart.pricing),
        )


class AddToCartRequest(BaseModel):
    product_id: str


class UpdateCartQuantityRequest(BaseModel):
    delta: int


class ApplyCouponRequest(BaseModel):
    coupon_code: str


class CheckoutResponse(BaseModel):
    order_id: str | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: str
    name: str
    unit_price: int
    quantity: int
    line_total: int


class OrderSchema(BaseModel):
    order_id: str
    session_id: str
    placed_at: datetime | None = None
    status: str
    items: list[OrderLineSchema]
    subtotal: int
    discount: int
    total: int
    coupon_code: str | None = None

    @classmethod
    def from_order(cls, order) -> "OrderSchema":
        return cls(
            order_id=str(order.order_id),
            session_id=str(order.session_id),
            placed_at=order.placed_at,
            status=order.status,
            items=[
                OrderLineSchema(
                    product_id=str(line.product_id),
                    name=line.name,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    line_total=line.line_total,
                )
                for line in order.lines
            ],
            subtotal=order.subtotal,
            discount=order.discount or 0,
            total=order.total,
            coupon_code=order.coupon_code,
        )


class UpdateOrderStatusRequest(BaseModel):
    status: str


class ReturnOrderRequest(BaseModel):
    session_id: str


# ---------------------------------------------------------------------------
# Coupons
# ---------------------------------------------------------------------------
class CouponSchema(BaseModel):
    code: str
    discount_percent: float
    is_active: bool


class CreateCouponRequest(BaseModel):
    code: str = Field(min_length=1)
    discount_percent: float = Field(ge=0)


class SetCouponActiveRequest(BaseModel):
    active: bool


class CouponCodeResponse(BaseModel):
    code: str


# ---------------------------------------------------------------------------
# Wishlist & dashboard
# ---------------------------------------------------------------------------
class WishlistResponse(BaseModel):
    session_id: str
    product_ids: list[str]
    products: list[ProductSchema]


class ToggleWishlistRequest(BaseModel):
    product_id: str


class ToggleWishlistResponse(BaseModel):
    product_id: str
    saved: bool


class StoreStatsResponse(BaseModel):
    revenue: int
    total_orders: int
