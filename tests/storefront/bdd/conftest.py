"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when
from storefront.cart.cart import ShoppingCart
from storefront.cart.checkout import Checkout
from storefront.cart.coupons import ApplyCouponToCart
from storefront.cart.items import AddToCart
from storefront.catalogue.management import AddProduct
from storefront.coupon.registry import RegisterCoupon, SetCouponActive
from storefront.order.order import Order
from storefront.order.status import UpdateOrderStatus
from storefront.session.opening import OpenSession


@pytest.fixture()
def catalogue():
    """Product ids by name."""
    return {}


@pytest.fixture()
def shopper():
    """Session id, last order id and the outcome of the last action."""
    return {"session_id": None, "order_id": None, "coupon_applied": None, "error": None}


def _cart(shopper):
    return current_domain.repository_for(ShoppingCart).get(shopper["session_id"])


def _order(shopper):
    return current_domain.repository_for(Order).get(shopper["order_id"])


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue lists "{name}" at {price:d}'))
def catalogue_lists(catalogue, name, price):
    catalogue[name] = current_domain.process(AddProduct(name=name, price=price), asynchronous=False)


@given(parsers.cfparse('the coupon "{code}" gives {percent:d} percent off'))
def coupon_exists(code, percent):
    current_domain.process(RegisterCoupon(code=code, discount_percent=percent), asynchronous=False)


@given("a shopper has opened a session")
def open_session(shopper):
    shopper["session_id"] = current_domain.process(OpenSession(), asynchronous=False)


@given(parsers.cfparse('the shopper adds "{name}" to the cart {times:d} times'))
def add_to_cart_times(shopper, catalogue, name, times):
    for _ in range(times):
        current_domain.process(
            AddToCart(session_id=shopper["session_id"], product_id=catalogue[name]),
            asynchronous=False,
        )


@given(parsers.cfparse('the shopper adds "{name}" to the cart'))
def add_to_cart(shopper, catalogue, name):
    add_to_cart_times(shopper, catalogue, name, 1)


# ---------------------------------------------------------------------------
# Steps usable as Given and When
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the shopper applies the coupon "{code}"'))
@when(parsers.cfparse('the shopper applies the coupon "{code}"'))
def apply_coupon(shopper, code):
    shopper["coupon_applied"] = current_domain.process(
        ApplyCouponToCart(session_id=shopper["session_id"], coupon_code=code),
        asynchronous=False,
    )


@given(parsers.cfparse('the admin deactivates the coupon "{code}"'))
@when(parsers.cfparse('the admin deactivates the coupon "{code}"'))
def deactivate_coupon(code):
    current_domain.process(SetCouponActive(code=code, active=False), asynchronous=False)


@given("the shopper checks out")
@when("the shopper checks out")
def checkout(shopper):
    shopper["order_id"] = current_domain.process(Checkout(session_id=shopper["session_id"]), asynchronous=False)


@given(parsers.cfparse('the admin sets the order status to "{status}"'))
@when(parsers.cfparse('the admin sets the order status to "{status}"'))
def set_order_status(shopper, status):
    current_domain.process(UpdateOrderStatus(order_id=shopper["order_id"], status=status), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(shopper, status):
    assert _order(shopper).status == status


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total_is(shopper, total):
    assert _cart(shopper).pricing.total == total


@then(parsers.cfparse('the coupon is rejected with "{message}"'))
def coupon_rejected(shopper, message):
    assert shopper["coupon_applied"] is False
    assert _cart(shopper).coupon_error == message


@then("the cart is empty")
def cart_is_empty(shopper):
    assert len(_cart(shopper).items) == 0


@then(parsers.cfparse('the cart still has the coupon "{code}"'))
def cart_keeps_coupon(shopper, code):
    assert _cart(shopper).applied_coupon.code == code


@then("the return is refused")
def return_refused(shopper):
    assert isinstance(shopper["error"], ValidationError)
