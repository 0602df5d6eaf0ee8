"""Wishlist management — command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.management import products_by_id
from storefront.domain import storefront
from storefront.wishlist.wishlist import Wishlist


@storefront.command(part_of="Wishlist")
class ToggleWishlistItem:
    session_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Wishlist)
class ToggleWishlistHandler:
    @handle(ToggleWishlistItem)
    def toggle(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.get(command.session_id)
        saved = wishlist.toggle(command.product_id)
        repo.add(wishlist)
        return saved


def wishlist_products(session_id):
    """Catalogue products saved in the session's wishlist."""
    wishlist = current_domain.repository_for(Wishlist).get(session_id)
    return products_by_id(wishlist.members)
