"""Shopping sessions — one cart and one wishlist per shopper.

A session id is the key for the shopper's ``ShoppingCart`` and ``Wishlist``
and is stamped on every order they place.
"""

from uuid import uuid4

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront
from storefront.utils.logging import get_logger
from storefront.wishlist.wishlist import Wishlist

logger = get_logger(__name__)


@storefront.command(part_of="ShoppingCart")
class OpenSession:
    """Start a shopping session. A session id is generated when none is given."""

    session_id = Identifier()


@storefront.command_handler(part_of=ShoppingCart)
class OpenSessionHandler:
    @handle(OpenSession)
    def open_session(self, command):
        session_id = str(command.session_id or uuid4())

        current_domain.repository_for(ShoppingCart).add(ShoppingCart.create(session_id))
        current_domain.repository_for(Wishlist).add(Wishlist.create(session_id))

        logger.info("Session opened", session_id=session_id)
        return session_id
