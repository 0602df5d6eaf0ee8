"""Application tests for wishlist toggling."""

from protean import current_domain
from storefront.cart.cart import ShoppingCart
from storefront.catalogue.management import RemoveProduct
from storefront.wishlist.management import ToggleWishlistItem, wishlist_products
from storefront.wishlist.wishlist import Wishlist


def _toggle(session_id, product_id):
    return current_domain.process(
        ToggleWishlistItem(session_id=session_id, product_id=product_id),
        asynchronous=False,
    )


class TestToggleWishlist:
    def test_toggle_saves_and_unsaves(self, session_id, watch):
        assert _toggle(session_id, watch) is True
        assert current_domain.repository_for(Wishlist).get(session_id).contains(watch)
        assert _toggle(session_id, watch) is False
        assert not current_domain.repository_for(Wishlist).get(session_id).contains(watch)

    def test_wishlist_does_not_touch_cart(self, session_id, watch):
        _toggle(session_id, watch)
        assert len(current_domain.repository_for(ShoppingCart).get(session_id).items) == 0

    def test_wishlist_products_resolves_listed(self, session_id, watch, headphones):
        _toggle(session_id, watch)
        _toggle(session_id, headphones)
        current_domain.process(RemoveProduct(product_id=headphones), asynchronous=False)

        assert [p.name for p in wishlist_products(session_id)] == ["Minimalist Leather Watch"]
        assert current_domain.repository_for(Wishlist).get(session_id).members == [watch, headphones]
