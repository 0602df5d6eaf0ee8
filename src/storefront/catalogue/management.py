"""Catalogue management — commands, handler and read helpers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    """List a new product in the catalogue."""

    name = String(required=True, max_length=255)
    price = Integer(required=True, min_value=0)
    category = String(max_length=50)
    image = String(max_length=500)


@storefront.command(part_of="Product")
class RemoveProduct:
    """Take a product off the catalogue. Unknown ids are ignored."""

    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageCatalogueHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            price=command.price,
            category=command.category,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product added", product_id=str(product.id), price=product.price)
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            logger.debug("Product already absent", product_id=str(command.product_id))
            return

        repo._dao.delete(product)
        logger.info("Product removed", product_id=str(command.product_id))


def list_products(search=None):
    """Return listed products, newest first, optionally filtered by name."""
    products = current_domain.repository_for(Product)._dao.query.all().items
    products = sorted(reversed(products), key=lambda p: p.added_at, reverse=True)

    needle = (search or "").strip().lower()
    if needle:
        products = [p for p in products if needle in p.name.lower()]
    return products


def products_by_id(product_ids):
    """Return the still-listed products among ``product_ids``, in listing order."""
    wanted = {str(pid) for pid in product_ids}
    return [p for p in list_products() if str(p.id) in wanted]
