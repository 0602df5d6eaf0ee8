"""Application tests for the starter data."""

from storefront.catalogue.management import list_products
from storefront.coupon.registry import list_coupons, validate_coupon
from storefront.seed import INITIAL_PRODUCTS, seed_storefront


class TestSeed:
    def test_seeds_empty_storefront(self):
        assert seed_storefront() is True
        assert [p.name for p in list_products()] == [p["name"] for p in INITIAL_PRODUCTS]
        assert validate_coupon("WELCOME10").discount_percent == 10

    def test_second_seed_is_noop(self):
        seed_storefront()
        assert seed_storefront() is False
        assert len(list_products()) == len(INITIAL_PRODUCTS)
        assert len(list_coupons()) == 1
