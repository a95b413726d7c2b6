"""Cart outcomes reported back to the shopper.

Every business-rule failure is a ``CartError``. Each carries a human-readable
message, a stable ``code``, the HTTP status the API answers with, and any
numeric context (available stock, cap, current quantity) the storefront needs
to render actionable feedback.
"""

LOGIN_URL = "/login"


class CartError(Exception):
    """Base class for expected cart failures."""

    status_code = 400
    default_message = "Cart request failed"

    def __init__(self, message=None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message, "code": self.code, **self.context}


class Unauthenticated(CartError):
    status_code = 401
    default_message = "Please log in to use the cart"

    def __init__(self, message=None):
        super().__init__(message, redirect_to=LOGIN_URL)


class ProductNotFound(CartError):
    status_code = 404
    default_message = "Product not found"


class OutOfStock(CartError):
    status_code = 409
    default_message = "Product is out of stock"


class QuantityCapExceeded(CartError):
    default_message = "Maximum quantity limit is {max_quantity} per item"

    def __init__(self, max_quantity, current_quantity):
        super().__init__(
            self.default_message.format(max_quantity=max_quantity),
            max_quantity=max_quantity,
            current_quantity=current_quantity,
        )


class InvalidQuantity(CartError):
    default_message = "Invalid quantity"


class InsufficientStock(CartError):
    default_message = "Only {stock_quantity} items available in stock"

    def __init__(self, stock_quantity, current_quantity):
        super().__init__(
            self.default_message.format(stock_quantity=stock_quantity),
            stock_quantity=stock_quantity,
            current_quantity=current_quantity,
        )


class CartNotFound(CartError):
    status_code = 404
    default_message = "Cart not found"


class ItemNotFound(CartError):
    status_code = 404
    default_message = "Item not found in cart"


class StorageFailure(CartError):
    status_code = 500
    default_message = "Error processing cart"
