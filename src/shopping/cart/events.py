"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from shopping.domain import shopping


@shopping.event(part_of="Cart")
class CartCreated:
    """A shopper's cart was created on their first add-to-cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)


@shopping.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart, or its quantity bumped by one."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartQuantityUpdated:
    """The shopper set a new quantity on a cart line."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartItemRemoved:
    """A line was removed from the cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
