"""Catalogue products as seen by the cart.

Products and their offers are owned by the catalogue and offer administration;
the cart only reads them. ``ProductRepository`` is the narrow lookup the cart
depends on.
"""

from enum import Enum

from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Float, HasMany, Integer, String

from shopping.domain import shopping


class OfferStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"


@shopping.entity(part_of="Product")
class Offer:
    """Promotional discount attached to a product."""

    status = String(choices=OfferStatus, default=OfferStatus.ACTIVE.value)
    discount = Float(required=True, min_value=0.0, max_value=100.0)  # percentage

    @property
    def is_active(self) -> bool:
        return self.status == OfferStatus.ACTIVE.value


@shopping.aggregate
class Product:
    title = String(max_length=255)
    price = Integer(required=True, min_value=0)  # whole currency units
    stock_quantity = Integer(default=0, min_value=0)
    is_deleted = Boolean(default=False)
    offers = HasMany(Offer)

    @property
    def is_available(self) -> bool:
        return not self.is_deleted


@shopping.repository(part_of=Product)
class ProductRepository:
    def find_by_id(self, product_id) -> Product | None:
        """Look up a product, returning ``None`` when the catalogue has no such id."""
        try:
            return self.get(str(product_id))
        except ObjectNotFoundError:
            return None

    def available(self, product_ids) -> dict[str, Product]:
        """Products that still exist and are not soft-deleted, keyed by id."""
        found = {}
        for product_id in product_ids:
            product = self.find_by_id(product_id)
            if product is not None and product.is_available:
                found[str(product_id)] = product
        return found
