"""Wishlist aggregate — product ids a shopper has saved for later.

Membership only: the wishlist never touches the cart or pricing, and it keeps
ids of products that have since left the catalogue.
"""

import json

from protean.fields import Identifier, Text

from storefront.domain import storefront
from storefront.wishlist.events import WishlistItemAdded, WishlistItemRemoved


@storefront.aggregate
class Wishlist:
    session_id = Identifier(identifier=True, required=True)
    product_ids = Text(default="[]")  # JSON array of product id strings

    @classmethod
    def create(cls, session_id):
        return cls(session_id=session_id, product_ids=json.dumps([]))

    @property
    def members(self):
        return json.loads(self.product_ids) if self.product_ids else []

    def contains(self, product_id):
        return str(product_id) in self.members

    def toggle(self, product_id):
        """Add the product if absent, remove it if present. Returns whether it is now saved."""
        product_id = str(product_id)
        members = self.members

        if product_id in members:
            members.remove(product_id)
            self.product_ids = json.dumps(members)
            self.raise_(WishlistItemRemoved(session_id=str(self.session_id), product_id=product_id))
            return False

        members.append(product_id)
        self.product_ids = json.dumps(members)
        self.raise_(WishlistItemAdded(session_id=str(self.session_id), product_id=product_id))
        return True
