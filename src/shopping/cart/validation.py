"""Quantity rules shared by the cart aggregate and the cart service."""

from shopping.cart.errors import InsufficientStock, InvalidQuantity, QuantityCapExceeded

MAX_QUANTITY_PER_ITEM = 5


def parse_quantity(value) -> int:
    """Coerce a requested quantity to a positive ``int`` or raise ``InvalidQuantity``.

    Accepts ints and strings of decimal digits (surrounding whitespace allowed).
    Booleans, floats and anything else are rejected.
    """
    if isinstance(value, bool):
        raise InvalidQuantity()

    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str) and value.strip().isdigit():
        quantity = int(value.strip())
    else:
        raise InvalidQuantity()

    if quantity < 1:
        raise InvalidQuantity()
    return quantity


def ensure_within_cap(requested: int, current: int) -> None:
    if requested > MAX_QUANTITY_PER_ITEM:
        raise QuantityCapExceeded(max_quantity=MAX_QUANTITY_PER_ITEM, current_quantity=current)


def ensure_in_stock(requested: int, stock_quantity: int, current: int) -> None:
    if requested > stock_quantity:
        raise InsufficientStock(stock_quantity=stock_quantity, current_quantity=current)
