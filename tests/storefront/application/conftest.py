import pytest
from protean import current_domain
from storefront.catalogue.management import AddProduct
from storefront.coupon.registry import RegisterCoupon
from storefront.session.opening import OpenSession


@pytest.fixture()
def session_id():
    return current_domain.process(OpenSession(session_id="sess-001"), asynchronous=False)


@pytest.fixture()
def headphones():
    return current_domain.process(
        AddProduct(name="Premium Wireless Headphones", price=12999, category="Electronics"),
        asynchronous=False,
    )


@pytest.fixture()
def watch():
    return current_domain.process(
        AddProduct(name="Minimalist Leather Watch", price=4500, category="Accessories"),
        asynchronous=False,
    )


@pytest.fixture()
def welcome10():
    return current_domain.process(RegisterCoupon(code="WELCOME10", discount_percent=10), asynchronous=False)
