"""Cart aggregate: one persistent cart per shopper.

A shopper has no cart until their first add-to-cart creates one. The cart
holds at most one line per product; each line's quantity stays within
``1..MAX_QUANTITY_PER_ITEM`` and never exceeds the product's stock at the
moment it is written. ``discounted_price`` on a line is a cache of the pricing
engine's output, refreshed by every mutation.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from shopping.cart.errors import ItemNotFound, OutOfStock
from shopping.cart.events import CartCreated, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from shopping.cart.validation import MAX_QUANTITY_PER_ITEM, ensure_in_stock, ensure_within_cap
from shopping.domain import shopping


@shopping.entity(part_of="Cart")
class LineItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_QUANTITY_PER_ITEM)
    discounted_price = Integer(min_value=0)
    added_at = DateTime()


@shopping.aggregate
class Cart:
    user_id = Identifier(required=True)
    items = HasMany(LineItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in the cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        cart = cls(user_id=user_id, created_at=now, updated_at=now)
        cart.raise_(CartCreated(cart_id=str(cart.id), user_id=str(user_id)))
        return cart

    # -------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def get_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ItemNotFound()
        return item

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_product(self, product_id, stock_quantity, unit_price):
        """Put one unit of a product in the cart and return the line's new quantity."""
        if not stock_quantity:
            raise OutOfStock()

        now = datetime.now(UTC)
        item = self.find_item(product_id)

        if item is None:
            item = LineItem(
                product_id=product_id,
                quantity=1,
                discounted_price=unit_price,
                added_at=now,
            )
            self.add_items(item)
        else:
            requested = item.quantity + 1
            ensure_within_cap(requested, item.quantity)
            ensure_in_stock(requested, stock_quantity, item.quantity)
            item.quantity = requested
            item.discounted_price = unit_price

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity=item.quantity,
            )
        )
        return item.quantity

    def update_item_quantity(self, product_id, quantity, stock_quantity, unit_price):
        item = self.get_item(product_id)
        ensure_within_cap(quantity, item.quantity)
        ensure_in_stock(quantity, stock_quantity, item.quantity)

        previous_quantity = item.quantity
        item.quantity = quantity
        item.discounted_price = unit_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return item

    def remove_item(self, product_id):
        item = self.get_item(product_id)
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=str(product_id),
            )
        )

    def refresh_prices(self, unit_prices):
        """Overwrite cached discounted prices for the products in ``unit_prices``.

        Lines whose product is missing from ``unit_prices`` (deleted from the
        catalogue) keep whatever they had cached.
        """
        for item in self.items:
            price = unit_prices.get(str(item.product_id))
            if price is not None and item.discounted_price != price:
                item.discounted_price = price


@shopping.repository(part_of=Cart)
class CartRepository:
    def find_by_user(self, user_id) -> Cart | None:
        """The shopper's cart, or ``None`` while they have never added anything."""
        records = self._dao.query.filter(user_id=str(user_id)).all().items
        if not records:
            return None
        return self.get(records[0].id)
