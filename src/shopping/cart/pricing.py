"""Pricing engine: discounted unit prices from a product's active offers.

Every cart operation prices lines through ``compute_discounted_price``: the
single best (highest) active offer wins, and the result is rounded half-up to
a whole currency unit. Python's built-in ``round`` rounds half to even, so the
arithmetic goes through ``Decimal`` instead.
"""

from decimal import ROUND_HALF_UP, Decimal

_HUNDRED = Decimal(100)
_WHOLE_UNIT = Decimal(1)


def best_active_discount(offers) -> float:
    """Highest discount percentage among active offers, or 0 when none are active."""
    return max((offer.discount or 0 for offer in offers if offer.is_active), default=0)


def apply_discount(price, discount) -> int:
    """``price * (1 - discount / 100)`` rounded half-up to an integer."""
    discounted = Decimal(str(price)) * (_HUNDRED - Decimal(str(discount))) / _HUNDRED
    return int(discounted.quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP))


def compute_discounted_price(product) -> int:
    return apply_discount(product.price, best_active_discount(product.offers))


def effective_unit_price(item, product) -> int:
    """The line's cached discounted price, falling back to the product's base price."""
    if item.discounted_price is not None:
        return item.discounted_price
    return product.price


def grand_total(lines) -> int:
    """Sum of ``quantity * unit price`` over ``(quantity, unit_price)`` pairs."""
    return sum(quantity * unit_price for quantity, unit_price in lines)
