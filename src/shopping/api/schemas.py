"""Pydantic request/response schemas for the cart API.

These are external contracts, separate from the internal Protean commands
and the service's result objects.
"""

from typing import Any

from pydantic import BaseModel

from shopping.cart.results import AddedToCart, PricedCart, QuantityChanged, RemovedFromCart


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class UpdateQuantityRequest(BaseModel):
    product_id: str
    # Passed through untouched; the cart service reports anything malformed as InvalidQuantity.
    quantity: Any = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "quantity": 3,
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class AddToCartResponse(BaseModel):
    success: bool = True
    product_id: str
    quantity: int
    message: str | None = None

    @classmethod
    def from_result(cls, result: AddedToCart) -> "AddToCartResponse":
        return cls(product_id=result.product_id, quantity=result.quantity, message=result.message)


class CartItemResponse(BaseModel):
    product_id: str
    title: str | None = None
    quantity: int
    price: int
    discounted_price: int
    subtotal: int


class CartResponse(BaseModel):
    success: bool = True
    items: list[CartItemResponse]
    grand_total: int
    message: str | None = None

    @classmethod
    def from_result(cls, cart: PricedCart) -> "CartResponse":
        return cls(
            items=[
                CartItemResponse(
                    product_id=item.product_id,
                    title=item.title,
                    quantity=item.quantity,
                    price=item.price,
                    discounted_price=item.discounted_price,
                    subtotal=item.subtotal,
                )
                for item in cart.items
            ],
            grand_total=cart.grand_total,
            message=cart.message,
        )


class QuantityUpdateResponse(BaseModel):
    success: bool = True
    updated_item_total: int
    updated_cart_total: int

    @classmethod
    def from_result(cls, result: QuantityChanged) -> "QuantityUpdateResponse":
        return cls(updated_item_total=result.item_total, updated_cart_total=result.cart_total)


class CartTotalResponse(BaseModel):
    success: bool = True
    updated_cart_total: int

    @classmethod
    def from_result(cls, result: RemovedFromCart) -> "CartTotalResponse":
        return cls(updated_cart_total=result.cart_total)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    code: str
    redirect_to: str | None = None
    stock_quantity: int | None = None
    max_quantity: int | None = None
    current_quantity: int | None = None
