"""Results returned by cart operations to the presentation layer."""

from dataclasses import dataclass, field

EMPTY_CART_MESSAGE = "Cart is empty"


@dataclass(frozen=True)
class AddedToCart:
    product_id: str
    quantity: int
    message: str = "Product added to cart"


@dataclass(frozen=True)
class QuantityChanged:
    product_id: str
    quantity: int
    item_total: int
    cart_total: int


@dataclass(frozen=True)
class RemovedFromCart:
    product_id: str
    cart_total: int


@dataclass(frozen=True)
class PricedLineItem:
    product_id: str
    title: str | None
    quantity: int
    price: int
    discounted_price: int

    @property
    def subtotal(self) -> int:
        return self.quantity * self.discounted_price


@dataclass(frozen=True)
class PricedCart:
    """A cart as the shopper sees it: visible lines with current prices."""

    user_id: str
    items: tuple[PricedLineItem, ...] = field(default_factory=tuple)

    @property
    def grand_total(self) -> int:
        return sum(item.subtotal for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def message(self) -> str | None:
        return EMPTY_CART_MESSAGE if self.is_empty else None
