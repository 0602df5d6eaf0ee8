"""Product aggregate — an item the storefront sells.

Prices are whole numbers in the smallest currency unit. Products are added
and removed by the store admin; there is no in-place editing, so a product's
price never changes while it is listed.
"""

from datetime import UTC, datetime
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from storefront.catalogue.events import ProductAdded
from storefront.domain import storefront

DEFAULT_CATEGORY = "Electronics"

CATEGORIES = ("Electronics", "Accessories", "Home", "Apparel")


def placeholder_image(seed: str) -> str:
    return f"https://picsum.photos/seed/{seed}/400/400"


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    price = Integer(required=True, min_value=0)
    category = String(max_length=50, default=DEFAULT_CATEGORY)
    image = String(max_length=500)
    added_at = DateTime()

    @classmethod
    def add(cls, name, price, category=None, image=None):
        """Create a listed product, filling in a placeholder image when none is given."""
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": ["Product name is required"]})

        product = cls(
            name=name,
            price=price,
            category=category or DEFAULT_CATEGORY,
            image=image or placeholder_image(uuid4().hex[:12]),
            added_at=datetime.now(UTC),
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=product.name,
                price=product.price,
                category=product.category,
                added_at=product.added_at,
            )
        )
        return product
